import logging
from enum import Enum
from threading import RLock

from sqlalchemy import select
from sqlalchemy.orm import Session
from sqlalchemy.orm import sessionmaker

from portfolio.models import SitePreference

logger = logging.getLogger(__name__)

THEME_PREFERENCE_KEY = "theme"


class Theme(str, Enum):
    LIGHT = "light"
    DARK = "dark"

    def toggled(self) -> "Theme":
        return Theme.DARK if self is Theme.LIGHT else Theme.LIGHT


class ThemePreference:
    """Site-wide theme cell backed by the `site_preferences` table.

    The value is read once by `load()` and written back on every `toggle()`.
    """

    def __init__(
        self,
        session_factory: sessionmaker[Session],
        default: Theme = Theme.LIGHT,
    ) -> None:
        self._session_factory = session_factory
        self._default = default
        self._current = default
        # Sync routes run in the threadpool.
        self._lock = RLock()

    @property
    def current(self) -> Theme:
        return self._current

    def load(self) -> Theme:
        """Read the stored theme, falling back to the default."""

        with self._session_factory() as db:
            stored = db.scalar(
                select(SitePreference.value).where(
                    SitePreference.key == THEME_PREFERENCE_KEY
                )
            )

        theme = self._default
        if stored is not None:
            try:
                theme = Theme(stored)
            except ValueError:
                logger.warning("Ignoring unknown stored theme %r", stored)

        with self._lock:
            self._current = theme
        return theme

    def toggle(self) -> Theme:
        """Flip the theme and persist the new value."""

        with self._lock:
            new_theme = self._current.toggled()
            with self._session_factory() as db:
                preference = db.get(SitePreference, THEME_PREFERENCE_KEY)
                if preference is None:
                    db.add(
                        SitePreference(key=THEME_PREFERENCE_KEY, value=new_theme.value)
                    )
                else:
                    preference.value = new_theme.value
                db.commit()
            self._current = new_theme

        logger.info("Theme switched to %s", new_theme.value)
        return new_theme
