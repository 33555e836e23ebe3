"""EditSessionController — the editor's edit/share/error state machine."""

from __future__ import annotations

import logging
from typing import Callable

from pagedraft.core.errors import InvalidTransition, PagedraftError, RegionReadError
from pagedraft.core.types import (
    Editing,
    SessionState,
    Sharing,
    ShowingError,
    ShowingLink,
    Viewing,
)
from pagedraft.session.client import SaveClient
from pagedraft.session.regions import RegionReader

logger = logging.getLogger(__name__)

Listener = Callable[[SessionState, SessionState], None]

SHARE_PATH = "/api/share"


class EditSessionController:
    """
    Drives one editor's session on a single asyncio event loop.

    States: Viewing → Editing → Sharing → ShowingLink | ShowingError → Viewing.

    Usage:
        ctl = EditSessionController(PlaywrightRegionReader(page), HttpSaveClient(url))
        ctl.enable_editing()
        state = await ctl.share()
        # state is ShowingLink(snapshot_id, share_url) or ShowingError(error)
        ctl.dismiss()

    Clicks and network completions are independent event handlers, so
    ``share()`` is guarded: while a save is in flight further calls are
    ignored and no second save request is sent.
    """

    def __init__(
        self,
        reader: RegionReader,
        client: SaveClient,
        *,
        share_url_base: str = "",
    ) -> None:
        self._reader = reader
        self._client = client
        self._share_url_base = share_url_base.rstrip("/")
        self._state: SessionState = Viewing()
        self._save_in_flight = False
        self._listeners: list[Listener] = []

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _transition(self, new_state: SessionState) -> None:
        old_state = self._state
        self._state = new_state
        logger.debug("session %s -> %s", old_state.kind.value, new_state.kind.value)
        for listener in list(self._listeners):
            listener(old_state, new_state)

    def _require(self, action: str, *allowed: type) -> None:
        if not isinstance(self._state, allowed):
            raise InvalidTransition(action, self._state)

    def share_url(self, snapshot_id: str) -> str:
        return f"{self._share_url_base}{SHARE_PATH}/{snapshot_id}"

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def is_saving(self) -> bool:
        return self._save_in_flight

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Call ``listener(old, new)`` after every transition. Returns an unsubscribe."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def enable_editing(self) -> None:
        self._require("enable editing", Viewing)
        self._transition(Editing())

    def cancel(self) -> None:
        """Leave edit mode without saving."""
        self._require("cancel", Editing)
        self._transition(Viewing())

    def dismiss(self) -> None:
        """Close the share-link or error dialog."""
        self._require("dismiss", ShowingLink, ShowingError)
        self._transition(Viewing())

    async def share(self) -> SessionState | None:
        """
        Save every region's current text as a new snapshot.

        Returns the resulting state, or None when a save is already in
        flight and the call was suppressed. Save failures end in
        ShowingError; the in-flight guard is released whatever happens.
        """
        if self._save_in_flight:
            logger.debug("share ignored: save already in flight")
            return None
        self._require("share", Editing)

        self._save_in_flight = True
        self._transition(Sharing())
        try:
            try:
                edits = await self._reader.read()
            except PagedraftError:
                raise
            except Exception as exc:
                raise RegionReadError(str(exc) or type(exc).__name__) from exc
            snapshot_id = await self._client.save(edits)
        except PagedraftError as exc:
            logger.info("share failed: %s", exc)
            self._transition(ShowingError(exc))
        except BaseException:
            self._transition(Editing())
            raise
        else:
            self._transition(
                ShowingLink(snapshot_id=snapshot_id, share_url=self.share_url(snapshot_id))
            )
        finally:
            self._save_in_flight = False
        return self._state
