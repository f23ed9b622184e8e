import logging

import numpy as np

import laze


def main() -> None:
    logging.basicConfig(level=logging.DEBUG)

    laze.constraint("PORT must be a valid port", laze.for_keys("PORT", lambda v: 0 < v < 65536))
    laze.constraint("numbers must be finite", laze.finite())

    laze.define("PORT", lambda: 8080)
    laze.define("WEIGHTS", lambda: np.linspace(0.0, 1.0, 5))

    print("PORT defined:", laze.defined("PORT"), "evaluated:", laze.evaluated("PORT"))
    print("PORT =", laze.read("PORT"))

    weights = laze.read("WEIGHTS")
    print("WEIGHTS =", weights, "writeable:", weights.flags.writeable)

    # Ignored: PORT is already materialized.
    laze.define("PORT", lambda: 9090)
    print("PORT still =", laze.read("PORT"))

    result = laze.try_read("MISSING")
    print("MISSING ok:", result.ok, "error:", result.error)


if __name__ == "__main__":
    main()
