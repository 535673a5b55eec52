# Copyright (c) 2026 Color Recall
# SPDX-License-Identifier: MIT

"""
Thread-safe handle around the active game session.

The handle owns the session lifecycle (create on start, replace on reset)
and serializes access: queries share a read lock, edits take the write
lock. A lock is held for exactly one call and never nested.
"""

from __future__ import annotations

import logging
import threading
from contextlib import contextmanager
from typing import Iterator, Optional, Sequence

import numpy as np

from color_recall.game.session import GameSession, SessionConfig
from color_recall.runtime.serializers import (
    SerializerFormat,
    acceptability_label,
    control_to_dict,
    session_to_json,
    to_css,
)

logger = logging.getLogger(__name__)


class SessionNotInitializedError(RuntimeError):
    """A session query was made before ``init_game()``."""


class ReadWriteLock:
    """Many concurrent readers or one writer."""

    def __init__(self) -> None:
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writing = False

    @contextmanager
    def read(self) -> Iterator[None]:
        with self._cond:
            while self._writing:
                self._cond.wait()
            self._readers += 1
        try:
            yield
        finally:
            with self._cond:
                self._readers -= 1
                if self._readers == 0:
                    self._cond.notify_all()

    @contextmanager
    def write(self) -> Iterator[None]:
        with self._cond:
            while self._writing or self._readers:
                self._cond.wait()
            self._writing = True
        try:
            yield
        finally:
            with self._cond:
                self._writing = False
                self._cond.notify_all()


class GameHandle:
    """
    UI-facing surface over one GameSession.

    Colors are returned as CSS strings and acceptability as string labels.
    Every query raises SessionNotInitializedError until ``init_game()``.

    Example::

        handle = GameHandle()
        handle.init_game()
        handle.update_controls("hsv", [30.0, 0.6, 0.7])
        handle.current_color_css("srgb")   # "rgb(178, 124, 71)"
        handle.compute_score()
    """

    def __init__(
        self,
        config: Optional[SessionConfig] = None,
        rng: Optional[np.random.Generator] = None,
    ) -> None:
        self._config = config
        self._rng = rng
        self._lock = ReadWriteLock()
        self._session: Optional[GameSession] = None

    def init_game(self) -> None:
        """Start a new game, replacing any current session."""
        session = GameSession(config=self._config, rng=self._rng)
        with self._lock.write():
            replaced = self._session is not None
            self._session = session
        logger.info("Game %s", "reset" if replaced else "started")

    @property
    def initialized(self) -> bool:
        return self._session is not None

    def _require(self) -> GameSession:
        if self._session is None:
            raise SessionNotInitializedError("init_game() must be called first")
        return self._session

    # -------------------------------------------------------------------------
    # Reads
    # -------------------------------------------------------------------------

    def target_color_css(self) -> str:
        with self._lock.read():
            return to_css(self._require().target_color())

    def current_color_css(self, model: str) -> str:
        with self._lock.read():
            return to_css(self._require().current_color(model))

    def available_models(self) -> list[str]:
        with self._lock.read():
            return self._require().available_models()

    def model_name(self, model: str) -> str:
        with self._lock.read():
            return self._require().model_name(model)

    def model_info_link(self, model: str) -> str:
        with self._lock.read():
            return self._require().model_info_link(model)

    def model_controls(self, model: str) -> Optional[list[dict]]:
        with self._lock.read():
            controls = self._require().model_controls(model)
        if controls is None:
            return None
        return [control_to_dict(c) for c in controls]

    def color_acceptable(self) -> str:
        with self._lock.read():
            return acceptability_label(self._require().color_acceptable())

    def compute_score(self) -> float:
        with self._lock.read():
            return self._require().compute_score()

    def snapshot_json(self, *, format: SerializerFormat = SerializerFormat.JSON) -> str:
        with self._lock.read():
            return session_to_json(self._require(), format=format)

    # -------------------------------------------------------------------------
    # Writes
    # -------------------------------------------------------------------------

    def switch_model(self, model: str) -> None:
        with self._lock.write():
            self._require().switch_model(model)

    def update_controls(self, model: str, values: Sequence[float]) -> None:
        with self._lock.write():
            self._require().update_controls(model, values)
