# -*- coding: utf-8 -*-
"""
backend/backoffice/modules/onboarding/services/form_submission_service.py

Webhook de Google Forms: marca como completados los items 'sent' del
formulario respondido, filtrando por el email del que responde si se conoce.

Autor: Eaton Academic
Fecha: 2026-10-17
"""

from __future__ import annotations

import logging
import re
from typing import Any, Dict, Mapping, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from backoffice.shared.utils.datetime_helpers import utcnow
from backoffice.modules.onboarding.repositories import OnboardingRepository
from backoffice.modules.onboarding.schemas import FormSubmittedRequest

logger = logging.getLogger(__name__)

_EMAIL_RE = re.compile(r"[a-z0-9._%+-]+@[a-z0-9.-]+\.[a-z]{2,}", re.IGNORECASE)


def extract_email_from_answers(answers: Optional[Mapping[str, Any]]) -> Optional[str]:
    """
    Busca un email en las respuestas del formulario.

    Prioriza campos cuyo nombre contiene "email"; si no, cualquier valor
    con forma de email.

    Examples:
        >>> extract_email_from_answers({"Parent Email": " Ana@Gmail.com "})
        'ana@gmail.com'
        >>> extract_email_from_answers({"Contact": "write to ana@gmail.com"})
        'ana@gmail.com'
        >>> extract_email_from_answers({"Name": "Ana"}) is None
        True
    """
    if not answers:
        return None
    for key, value in answers.items():
        text = str(value or "").strip().lower()
        lower_key = str(key).lower()
        if ("email" in lower_key or "e-mail" in lower_key) and "@" in text:
            return text
    for value in answers.values():
        match = _EMAIL_RE.search(str(value or ""))
        if match:
            return match.group(0).lower()
    return None


class FormSubmissionService:
    def __init__(self, items: Optional[OnboardingRepository] = None) -> None:
        self.items = items or OnboardingRepository()

    async def record_submission(
        self,
        session: AsyncSession,
        submission: FormSubmittedRequest,
    ) -> Dict[str, Any]:
        respondent = (submission.respondent_email or "").strip().lower()
        email = respondent or extract_email_from_answers(submission.answers)

        matching = await self.items.list_sent_by_form(session, submission.form_id, sent_to=email)
        if not matching:
            logger.info("form_submission_unmatched form=%s email=%s", submission.form_id, email or "unknown")
            return {
                "success": True,
                "matched": False,
                "message": "Form submission received but no matching pending items found",
            }

        updated = await self.items.mark_completed(session, [item.id for item in matching], utcnow())
        await session.commit()

        logger.info("form_submission_matched form=%s updated=%s", submission.form_id, updated)
        return {
            "success": True,
            "matched": True,
            "updated": updated,
            "items": [item.item_key for item in matching],
        }


__all__ = ["FormSubmissionService", "extract_email_from_answers"]
# Fin del archivo backend/backoffice/modules/onboarding/services/form_submission_service.py
