# SPDX-License-Identifier: MIT

import re
from typing import Literal, Optional, TypedDict, TypeAlias

import typer

ActionKind: TypeAlias = Literal["zoom", "zoom-at", "pan", "reset"]


class Action(TypedDict):
    kind: ActionKind
    delta: float
    x: Optional[float]
    y: Optional[float]


_NUMBER = r"-?\d+(?:\.\d+)?"


def parse_action(action_param: str) -> Action:
    """
    Parse a viewport action given on the command line.

    Accepted forms: ``zoom:<delta>``, ``zoom-at:<delta>:<x>:<y>``,
    ``pan:<dx>`` or ``pan:<dx>:<dy>``, and ``reset``.
    """
    action = action_param.strip().lower()

    if action in ("reset", "r"):
        return {"kind": "reset", "delta": 0, "x": None, "y": None}

    zoom_match = re.match(rf"^zoom:({_NUMBER})$", action)
    if zoom_match:
        return {
            "kind": "zoom",
            "delta": float(zoom_match.group(1)),
            "x": None,
            "y": None,
        }

    zoom_at_match = re.match(rf"^zoom-at:({_NUMBER}):({_NUMBER}):({_NUMBER})$", action)
    if zoom_at_match:
        return {
            "kind": "zoom-at",
            "delta": float(zoom_at_match.group(1)),
            "x": float(zoom_at_match.group(2)),
            "y": float(zoom_at_match.group(3)),
        }

    pan_match = re.match(rf"^pan:({_NUMBER})(?::({_NUMBER}))?$", action)
    if pan_match:
        dy = pan_match.group(2)
        return {
            "kind": "pan",
            "delta": 0,
            "x": float(pan_match.group(1)),
            "y": float(dy) if dy is not None else 0.0,
        }

    raise typer.BadParameter(
        f"Incorrect action format '{action_param}' "
        "(use zoom:D, zoom-at:D:X:Y, pan:DX[:DY] or reset)"
    )


def parse_color(color_param: str) -> tuple[str, str]:
    """Parse ``<priority level>=<color>`` into its two parts."""
    match = re.match(r"^(\d+)=(\S+)$", color_param.strip())
    if match is None:
        raise typer.BadParameter(
            f"Incorrect color format '{color_param}' (use LEVEL=COLOR, e.g. 1=#38bdf8)"
        )
    return match.group(1), match.group(2)
