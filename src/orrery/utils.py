"""
Utility functions for the Orrery package.

Validation reporting, angle normalization, and conversions between
absolute instants and elapsed days.
"""

import warnings
from datetime import datetime, timedelta, timezone
from numbers import Real
from typing import Type, Sequence, Union

import numpy as np

from .config import config
from .constants import SECONDS_PER_DAY, UNIX_EPOCH_JD, J2000

# datetimes, numpy datetime64 values, or plain numbers read as days since J2000
Instant = Union[datetime, float, Sequence[datetime], np.ndarray]

_J2000_DATETIME64 = np.datetime64(J2000.replace(tzinfo=None), 'us')


def validation_error(message: str, error_class: Type[Exception] = ValueError):
    """
    Raise error or warn based on config.STRICT_VALIDATION.

    This function provides consistent validation behavior across the package.
    When STRICT_VALIDATION is True (default), raises the specified exception.
    When False, issues a UserWarning instead.

    Parameters
    ----------
    message : str
        Validation error message
    error_class : Type[Exception], optional
        Exception class to raise if STRICT_VALIDATION is True.
        Default: ValueError

    Raises
    ------
    Exception (of type error_class)
        If config.STRICT_VALIDATION is True

    Warns
    -----
    UserWarning
        If config.STRICT_VALIDATION is False
    """
    if config.STRICT_VALIDATION:
        raise error_class(message)
    else:
        warnings.warn(message, UserWarning, stacklevel=3)


def normalize_degrees(angle):
    """Wrap an angle (or array of angles) into [0, 360) degrees."""
    wrapped = np.mod(angle, 360.0)
    # np.mod can return 360.0 for tiny negative inputs
    wrapped = np.where(wrapped >= 360.0, 0.0, wrapped)
    return float(wrapped) if np.ndim(wrapped) == 0 else wrapped


def as_utc(instant: datetime) -> datetime:
    """Attach UTC to naive datetimes; convert aware ones to UTC."""
    if not isinstance(instant, datetime):
        raise TypeError(f"instant must be a datetime, got {type(instant)}")
    if instant.tzinfo is None:
        return instant.replace(tzinfo=timezone.utc)
    return instant.astimezone(timezone.utc)


def julian_day(instant: datetime) -> float:
    """Julian day number of an instant."""
    return UNIX_EPOCH_JD + as_utc(instant).timestamp() / SECONDS_PER_DAY


def days_since(instant: datetime, epoch: datetime = J2000) -> float:
    """Signed elapsed days from ``epoch`` to ``instant``."""
    return (as_utc(instant) - as_utc(epoch)).total_seconds() / SECONDS_PER_DAY


def days_since_j2000(instant: datetime) -> float:
    """Signed elapsed days since the J2000.0 epoch."""
    return days_since(instant, J2000)


def j2000_days(instants: Instant):
    """
    Days since J2000.0 for any accepted instant representation.

    Numbers are taken to already be days since J2000.0, which covers
    dates outside the ``datetime`` range (years 1 to 9999).
    ``datetime64`` values are converted in numpy without going through
    ``datetime``.

    Returns
    -------
    float or np.ndarray
        Scalar for a single instant, 1-D array for a sequence.
    """
    if isinstance(instants, datetime):
        return days_since_j2000(instants)
    if isinstance(instants, Real):
        return float(instants)

    values = np.asarray(instants)
    if values.dtype.kind == 'M':
        days = ((values.astype('datetime64[us]') - _J2000_DATETIME64)
                / np.timedelta64(1, 'D'))
    elif values.dtype.kind in 'iuf':
        days = values.astype(float)
    else:
        days = np.array([days_since_j2000(t) for t in instants], dtype=float)
    return float(days) if np.ndim(days) == 0 else days


def elapsed_days(instants: Instant, epoch: datetime = J2000):
    """
    Convert one instant or a sequence of instants to days since ``epoch``.

    Returns
    -------
    float or np.ndarray
        Scalar for a single instant, 1-D array for a sequence.
    """
    return j2000_days(instants) - days_since_j2000(epoch)


def instant_from_days(days: float) -> datetime:
    """
    UTC datetime lying ``days`` after J2000.0.

    Raises
    ------
    OverflowError
        If the instant falls outside the years 1 to 9999.
    """
    return J2000 + timedelta(days=float(days))
