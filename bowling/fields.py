"""Encapsulates the pin counts and frame notations of the bowling game."""
import math
import numbers
import re

from django.core import exceptions as django_exceptions
from django.utils.translation import gettext_lazy as _
from rest_framework import serializers

from bowling import exceptions

MAX_PINS = 10

# X (strike), 7/ (spare) or 3-5 (open frame).
FRAME_NOTATION = re.compile(r'X|[0-9]/|[0-9]-[0-9]')

# The 10th frame: X-X-X, X-X-7, X-7/, X-3-4, 7/X, 7/3 or 3-5.
TENTH_FRAME_NOTATION = re.compile(
    r'X-X-X|X-X-[0-9]|X-[0-9]/|X-[0-9]-[0-9]|[0-9]/X|[0-9]/[0-9]|[0-9]-[0-9]')


def validate_pins(value, error_class=exceptions.InvalidThrowError,
                  name='throw'):
    """Validates a single pin count.

    Args:
        value: number of pins knocked down
        error_class: exception raised when the value is invalid
        name: what the value is, used in the error message

    Returns:
        the pin count as an integer
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise error_class(
            '{} must be a whole number of pins, got: {!r}'.format(name, value))
    if math.isnan(value):
        raise error_class('{} cannot be NaN'.format(name))
    if value < 0:
        raise error_class('{} cannot be negative'.format(name))
    if value > MAX_PINS:
        raise error_class('{} cannot exceed {} pins'.format(name, MAX_PINS))
    if value != int(value):
        raise error_class(
            '{} must be a whole number of pins, got: {!r}'.format(name, value))
    return int(value)


def validate_notation(value):
    if not (FRAME_NOTATION.fullmatch(value) or
            TENTH_FRAME_NOTATION.fullmatch(value)):
        raise django_exceptions.ValidationError(
            'Frame notation: %(value)s is invalid.' % {'value': value})


class FrameNotationField(serializers.CharField):
    """Encapsulates the notation of a single bowled frame."""
    description = _('The throws of a frame, e.g. X, 7/ or 3-5.')

    default_validators = [validate_notation]

    def __init__(self, *args, **kwargs):
        kwargs['max_length'] = 5
        super(FrameNotationField, self).__init__(*args, **kwargs)
