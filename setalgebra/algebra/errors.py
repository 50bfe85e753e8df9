# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 setalgebra Rui Pinheiro


class SetAlgebraError(Exception):
    """Base class for the errors raised by :mod:`setalgebra` itself.

    Exceptions raised by caller-supplied callbacks are never wrapped in it.
    """


class TypeContractViolation(SetAlgebraError, TypeError):  # noqa: N818 the name describes the broken contract, not an error kind
    """An operand does not honour the contract an operation requires.

    Raised when the receiver is not set-like, when a callback or species hook is not callable,
    or when operations are installed onto a type that cannot receive them.
    """


class ArityViolation(SetAlgebraError, TypeError):  # noqa: N818 the name describes the broken contract, not an error kind
    """An n-ary combining operation was called without any operand besides the receiver."""
