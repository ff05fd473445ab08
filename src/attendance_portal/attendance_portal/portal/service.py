from __future__ import annotations

import logging
from typing import Optional

from ..attendance.service import HistoryPresenter
from ..core.constants import DEFAULT_QR_SIZE, MSG_GENERIC_FAILURE
from ..core.exceptions import IdentityResolutionError, StaleSessionError, ValidationError
from ..employees.service import IdentityResolver
from ..qr.service import QrArtifact, QrCodeGenerator
from .state import PortalSession

logger = logging.getLogger(__name__)


class PortalService:
    """Drives a PortalSession through auth -> dashboard -> auth."""

    def __init__(
        self,
        resolver: IdentityResolver,
        history: HistoryPresenter,
        qr: QrCodeGenerator,
        *,
        qr_size: int = DEFAULT_QR_SIZE,
    ):
        self._resolver = resolver
        self._history = history
        self._qr = qr
        self._qr_size = int(qr_size)

    @property
    def history_presenter(self) -> HistoryPresenter:
        return self._history

    def submit(self, session: PortalSession) -> bool:
        """Identify or register the employee in the form, then load history.

        Returns True when the session moved to the dashboard. Errors only ever
        land in `session.error`.
        """
        epoch = session.begin_submit()
        if epoch is None:
            logger.debug("Ignoring submit while a previous one is still running")
            return False

        form = session.form
        try:
            employee = self._resolver.resolve(form.id, form.name, form.department)
            records = self._history.load_history(employee.id)
            if not session.enter_dashboard(epoch, employee, records):
                logger.info("Discarding login result for %s: session was reset", employee.id)
                return False
            return True
        except (ValidationError, IdentityResolutionError) as e:
            session.fail(epoch, str(e))
        except Exception:
            logger.exception("Unexpected error during identity submit")
            session.fail(epoch, MSG_GENERIC_FAILURE)
        finally:
            session.finish_submit(epoch)
        return False

    def logout(self, session: PortalSession) -> None:
        session.logout()

    def render_qr(self, session: PortalSession, *, epoch: Optional[int] = None, size: Optional[int] = None) -> Optional[QrArtifact]:
        """QR artifact for the session's employee.

        Raises StaleSessionError when there is no employee, or when the session
        was reset before or while the image was generated. Returns None when
        generation failed (the page keeps its placeholder).
        """
        with session.lock:
            current = session.epoch if epoch is None else epoch
            employee = session.employee
            if employee is None or not session.is_current(current):
                raise StaleSessionError("No active employee for this session")

        artifact = self._qr.generate(employee.qr_payload, size or self._qr_size)

        if not session.is_current(current):
            raise StaleSessionError("Session was reset while the QR code was generated")
        return artifact
