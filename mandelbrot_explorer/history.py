"""
Undo stack of viewports.
"""


class NavigationHistory:
    """
    Chronological stack of Viewports that is never empty.

    The last entry is the current view. The first entry is the floor:
    undo() never removes it.
    """

    def __init__(self, initial):
        self._views = [initial]

    @property
    def current(self):
        return self._views[-1]

    def push(self, view):
        self._views.append(view)
        return view

    def undo(self):
        """Drop the current view unless it is the only one. Returns the new current view."""
        if len(self._views) > 1:
            self._views.pop()
        return self._views[-1]

    def replace_current(self, view):
        """
        Swap the current view for `view`.

        When the floor is the only entry it is kept and `view` is pushed on
        top, so the starting view stays reachable.
        """
        if len(self._views) > 1:
            self._views.pop()
        self._views.append(view)
        return view

    def __len__(self):
        return len(self._views)

    def __iter__(self):
        return iter(self._views)

    def __repr__(self):
        return f"NavigationHistory({len(self._views)} views, current={self.current!r})"
