# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#             github.com/dedalus-labs/openmeasure-python/LICENSE
# ==============================================================================

"""Wire a few shapes to a logging channel and publish their total.

Run with ``python examples/quickstart.py``.  Set ``OPENMEASURE_LOG_JSON=1``
to see the structured log output.
"""

from __future__ import annotations

from openmeasure import Wiring
from openmeasure.utils import get_logger


log = get_logger("openmeasure.examples.quickstart")

CONFIG = {
    "shapes": [
        {"kind": "square", "side": 10},
        {"kind": "circle", "radius": 5},
        {"kind": "triangle", "base": 6, "height": 4},
    ],
    "channel": {"name": "log"},
    "formatters": ["json", "text", "html"],
}


def main() -> None:
    assembly = Wiring().build(CONFIG)
    for name, rendered in assembly.report().items():
        log.info("%s: %s", name, rendered)
    result = assembly.publish("text")
    log.info("delivered=%s", result.ok)


if __name__ == "__main__":
    main()
