# -*- coding: utf-8 -*-
"""
backend/backoffice/modules/onboarding/services/__init__.py
"""

from .n8n_client import N8nFormStatusClient, N8nWebhookClient
from .pending_service import PendingOnboardingService, get_first_name
from .status_check_service import OnboardingStatusChecker
from .form_submission_service import FormSubmissionService, extract_email_from_answers
from .send_service import SendOnboardingService, build_merge_data

__all__ = [
    "N8nFormStatusClient",
    "N8nWebhookClient",
    "PendingOnboardingService",
    "get_first_name",
    "OnboardingStatusChecker",
    "FormSubmissionService",
    "extract_email_from_answers",
    "SendOnboardingService",
    "build_merge_data",
]
