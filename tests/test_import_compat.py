from __future__ import annotations


def test_top_level_exports() -> None:
    import laze

    for name in laze.__all__:
        assert getattr(laze, name) is not None


def test_package_paths_work() -> None:
    from laze.core import LazyRegistry as CoreRegistry
    from laze.core.registry import REGISTRY, LazyRegistry
    from laze.core.registry.service import REGISTRY as SERVICE_REGISTRY
    from laze.defaults import define, read

    assert CoreRegistry is LazyRegistry
    assert REGISTRY is SERVICE_REGISTRY
    assert define is not None
    assert read is not None
