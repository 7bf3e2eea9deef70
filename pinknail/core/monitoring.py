"""
Monitoring and Tracing Configuration Module.

This module provides integration with Pydantic Logfire for monitoring and
tracing of the Pink Nail API, including:
- API endpoint tracing
- Database operation monitoring
- Booking and contact inquiry events
- Error tracking

Logfire is opt-in: nothing is sent unless ``LOGFIRE_ENABLED`` is true and a
``LOGFIRE_TOKEN`` is configured. Every helper degrades to a debug log line when
Logfire is not configured.
"""

import os
from typing import Optional

import logfire
from fastapi import FastAPI

from pinknail.core.logging_config import get_logger

logger = get_logger(__name__)

LOGFIRE_ENABLED = os.getenv("LOGFIRE_ENABLED", "false").lower() in ("true", "1", "yes")
LOGFIRE_TOKEN = os.getenv("LOGFIRE_TOKEN", "")
LOGFIRE_PROJECT_NAME = os.getenv("LOGFIRE_PROJECT_NAME", "pinknail")
LOGFIRE_ENVIRONMENT = os.getenv("LOGFIRE_ENVIRONMENT", "development")
LOGFIRE_SERVICE_NAME = os.getenv("LOGFIRE_SERVICE_NAME", "pinknail-api")
LOGFIRE_SERVICE_VERSION = os.getenv("LOGFIRE_SERVICE_VERSION", "0.1.0")

# Sampling configuration
LOGFIRE_SAMPLE_RATE = float(os.getenv("LOGFIRE_SAMPLE_RATE", "1.0"))
LOGFIRE_TRACE_SAMPLE_RATE = float(os.getenv("LOGFIRE_TRACE_SAMPLE_RATE", "1.0"))

# Feature flags
LOGFIRE_TRACE_SQLALCHEMY = os.getenv("LOGFIRE_TRACE_SQLALCHEMY", "true").lower() in ("true", "1", "yes")
LOGFIRE_TRACE_HTTPX = os.getenv("LOGFIRE_TRACE_HTTPX", "true").lower() in ("true", "1", "yes")
LOGFIRE_TRACE_FASTAPI = os.getenv("LOGFIRE_TRACE_FASTAPI", "true").lower() in ("true", "1", "yes")

_logfire_configured = False


def is_logfire_configured() -> bool:
    """Return whether ``initialize_logfire`` configured an exporter in this process."""
    return _logfire_configured


def initialize_logfire(app: FastAPI | None = None) -> bool:
    """
    Initialize Pydantic Logfire for monitoring and tracing.

    This function sets up Logfire with automatic instrumentation for:
    - SQLAlchemy database operations
    - HTTPX HTTP requests
    - FastAPI endpoints

    Args:
        app: FastAPI application instance for FastAPI instrumentation (optional).

    Returns:
        True when Logfire was configured, False when it stays disabled.
    """
    global _logfire_configured

    if not LOGFIRE_ENABLED:
        logger.info("Logfire monitoring is disabled. Set LOGFIRE_ENABLED=true to enable.")
        return False

    if not LOGFIRE_TOKEN:
        logger.warning(
            "Logfire is enabled but LOGFIRE_TOKEN is not set. "
            "Monitoring will not work. Set LOGFIRE_TOKEN to enable Logfire."
        )
        return False

    try:
        logfire.configure(
            token=LOGFIRE_TOKEN,
            service_name=LOGFIRE_SERVICE_NAME,
            service_version=LOGFIRE_SERVICE_VERSION,
            environment=LOGFIRE_ENVIRONMENT,
            sampling=logfire.SamplingOptions(
                head=LOGFIRE_SAMPLE_RATE,
                tail=LOGFIRE_TRACE_SAMPLE_RATE,
            ),
        )
        _logfire_configured = True
    except Exception as e:
        logger.error(f"Failed to initialize Logfire: {e}", exc_info=True)
        return False

    if LOGFIRE_TRACE_SQLALCHEMY:
        try:
            logfire.instrument_sqlalchemy()
            logger.info("Logfire: SQLAlchemy instrumentation enabled")
        except Exception as e:
            logger.warning(f"Failed to instrument SQLAlchemy: {e}")

    if LOGFIRE_TRACE_HTTPX:
        try:
            logfire.instrument_httpx()
            logger.info("Logfire: HTTPX instrumentation enabled")
        except Exception as e:
            logger.warning(f"Failed to instrument HTTPX: {e}")

    if LOGFIRE_TRACE_FASTAPI:
        if app is None:
            logger.debug("FastAPI app instance not provided, skipping FastAPI instrumentation")
        else:
            try:
                logfire.instrument_fastapi(app=app)
                logger.info("Logfire: FastAPI instrumentation enabled")
            except Exception as e:
                logger.warning(f"Failed to instrument FastAPI: {e}")

    logger.info(
        f"Logfire monitoring initialized: "
        f"project={LOGFIRE_PROJECT_NAME}, "
        f"environment={LOGFIRE_ENVIRONMENT}, "
        f"service={LOGFIRE_SERVICE_NAME}"
    )
    return True


def log_api_request(method: str, path: str, status_code: int, duration_ms: float) -> None:
    """
    Log an API request with performance metrics.

    Args:
        method: HTTP method
        path: Request path
        status_code: HTTP status code
        duration_ms: Request duration in milliseconds
    """
    if not _logfire_configured:
        logger.debug(f"API request: {method} {path} -> {status_code} ({duration_ms:.2f}ms)")
        return
    try:
        logfire.info(
            "API request completed",
            method=method,
            path=path,
            status_code=status_code,
            duration_ms=duration_ms,
        )
    except Exception:
        logger.debug(f"Could not log API request to Logfire: {method} {path}")


def log_booking_created(booking_id: int, service_id: int, date: str, time_slot: str) -> None:
    """
    Log a newly submitted booking.

    Args:
        booking_id: The booking primary key
        service_id: The booked service
        date: ISO date of the appointment
        time_slot: Appointment slot in ``HH:MM`` form
    """
    if not _logfire_configured:
        logger.debug(f"Booking created: booking_id={booking_id} date={date} time_slot={time_slot}")
        return
    try:
        logfire.info(
            "Booking created",
            booking_id=booking_id,
            service_id=service_id,
            date=date,
            time_slot=time_slot,
        )
    except Exception:
        logger.debug(f"Could not log booking to Logfire: booking_id={booking_id}")


def log_contact_submitted(contact_id: int, subject: str) -> None:
    """Log a contact inquiry submitted from the public site."""
    if not _logfire_configured:
        logger.debug(f"Contact inquiry submitted: contact_id={contact_id}")
        return
    try:
        logfire.info("Contact inquiry submitted", contact_id=contact_id, subject=subject)
    except Exception:
        logger.debug(f"Could not log contact inquiry to Logfire: contact_id={contact_id}")


def log_error(error_type: str, error_message: str, context: Optional[dict] = None) -> None:
    """
    Log an error with context for debugging.

    Args:
        error_type: Type of error
        error_message: Error message
        context: Additional context dictionary
    """
    if not _logfire_configured:
        logger.debug(f"{error_type}: {error_message}")
        return
    try:
        logfire.error(
            f"{error_type}: {error_message}",
            **(context or {}),
        )
    except Exception:
        logger.debug(f"Could not log error to Logfire: {error_type}")
