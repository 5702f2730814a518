# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#               github.com/dedalus-labs/solidcap-python/LICENSE
# ==============================================================================

"""Liskov Substitution Principle.

``View.add_subview`` always attaches the subview.  ``NaiveCustomView``
overrides it to silently drop zero-sized views, so code written against
``View`` behaves differently when handed the subclass.  ``CustomView`` keeps
the inherited contract and offers the filtering under a new name.
"""

from __future__ import annotations

from typing import Annotated, TextIO

from pydantic import Field
from pydantic.dataclasses import dataclass


@dataclass(frozen=True)
class Frame:
    width: Annotated[float, Field(ge=0)] = 0.0
    height: Annotated[float, Field(ge=0)] = 0.0

    @property
    def is_empty(self) -> bool:
        return self.width <= 0 or self.height <= 0


ZERO = Frame()


class View:
    """Minimal view hierarchy node."""

    def __init__(self, frame: Frame = ZERO) -> None:
        self.frame = frame
        self.subviews: list[View] = []
        self.superview: View | None = None

    def add_subview(self, view: View) -> None:
        if view.superview is not None:
            view.superview.subviews.remove(view)
        view.superview = self
        self.subviews.append(view)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(frame={self.frame!r}, subviews={len(self.subviews)})"


# -- naive -------------------------------------------------------------------


class NaiveCustomView(View):
    def add_subview(self, view: View) -> None:
        if not view.frame.is_empty:
            super().add_subview(view)


# -- correct -----------------------------------------------------------------


class CustomView(View):
    def add_subview_if_not_zero(self, view: View) -> bool:
        """Attach *view* unless its frame is empty; report whether it was attached."""
        if view.frame.is_empty:
            return False
        self.add_subview(view)
        return True


def demo(file: TextIO | None = None) -> None:
    naive = NaiveCustomView()
    naive.add_subview(View(ZERO))
    print(f"NaiveCustomView.add_subview kept {len(naive.subviews)} subview(s)", file=file)

    custom = CustomView()
    attached = custom.add_subview_if_not_zero(View(ZERO))
    print(f"CustomView.add_subview_if_not_zero attached - {attached}", file=file)


__all__ = ["CustomView", "Frame", "NaiveCustomView", "View", "ZERO", "demo"]
