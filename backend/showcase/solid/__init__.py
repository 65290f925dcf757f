"""
SOLID principle illustrations.

Each module pairs a violating ``...Bad`` version with a conforming one and
exposes ``demo()``, which returns printable lines.
"""

from . import dip, isp, lsp, ocp, srp

DEMOS = {
    "srp": srp.demo,
    "ocp": ocp.demo,
    "lsp": lsp.demo,
    "isp": isp.demo,
    "dip": dip.demo,
}

__all__ = ["DEMOS", "dip", "isp", "lsp", "ocp", "srp"]
