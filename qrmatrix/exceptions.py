# -*- coding: utf-8 -*-
"""Exceptions raised by the QR matrix encoder."""


class QRMatrixError(Exception):
    """Base class for every error raised by this package."""


class CapacityExceeded(QRMatrixError, ValueError):
    """The payload does not fit into version 40 at the requested EC level."""


class InvalidCharacter(QRMatrixError, ValueError):
    """A character cannot be represented in the selected mode or charset."""


class InvalidConfiguration(QRMatrixError, ValueError):
    """An encoding or rendering parameter was rejected before encoding started."""


class PlacementError(QRMatrixError, AssertionError):
    """
    Codeword bits and free modules disagree after placement.

    This indicates a defect in the version/capacity tables, never bad input.
    """
