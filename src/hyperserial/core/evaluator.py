"""Scoped evaluation of configuration blocks.

A configuration block is a callable that populates a descriptor. Two styles
are accepted:

* Implicit receiver: a plain function without positional parameters. Its
  unqualified references to the descriptor's attribute names are resolved
  against the descriptor::

      def block():
          href("/users")

* Explicit receiver: any callable taking the descriptor as its first
  positional argument::

      def block(d):
          d.href("/users")

Attribute names take precedence over module globals and enclosing-scope
variables of the same name; names assigned inside the block itself stay
local. Rebinding works on a private copy of the function's globals and
closure, so nothing outside the block observes the descriptor's names.
"""

import inspect
import types
from typing import Any, Callable, TypeVar

from hyperserial.common.exceptions import (
    invalid_block_error,
    missing_block_error,
    unknown_attribute_error,
)
from hyperserial.core.descriptors import Descriptor
from hyperserial.logging import get_logger
from hyperserial.observability.context import sanitize_extras

logger = get_logger(__name__)

D = TypeVar("D", bound=Descriptor)

_POSITIONAL = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
    inspect.Parameter.VAR_POSITIONAL,
)


def evaluate(descriptor: D, block: Callable[..., Any]) -> D:
    """Run ``block`` once against ``descriptor`` and return the descriptor.

    Args:
        descriptor: Descriptor the block's attribute calls are dispatched to
        block: Configuration block in implicit or explicit receiver style

    Returns:
        The same descriptor, populated by the block

    Raises:
        MissingBlockError: If ``block`` is None or not callable
        SerializerError: If ``block`` is a coroutine or generator function,
            which would return without running its body (INVALID_BLOCK)
        UnknownAttributeError: If the block uses a name the descriptor does
            not declare
    """
    if block is None or not callable(block):
        raise missing_block_error("evaluate", block)
    if _is_deferred(block):
        raise invalid_block_error(
            "evaluate", block, "configuration blocks must be plain synchronous functions"
        )

    if takes_receiver(block):
        style = "explicit"
        block(descriptor)
    else:
        style = "implicit"
        _run_rebound(block, descriptor)

    logger.debug(
        "evaluator.block_evaluated",
        extra=sanitize_extras(
            {
                "descriptor": type(descriptor).__name__,
                "block": getattr(block, "__qualname__", repr(block)),
                "style": style,
            }
        ),
    )
    return descriptor


def takes_receiver(block: Callable[..., Any]) -> bool:
    """Whether ``block`` is called with the descriptor as an argument.

    Only plain functions can have their names rebound, so every other
    callable (bound methods, partials, callable objects) is treated as an
    explicit-receiver block.
    """
    if not isinstance(block, types.FunctionType):
        return True
    parameters = inspect.signature(block).parameters.values()
    return any(p.kind in _POSITIONAL for p in parameters)


def _is_deferred(block: Callable[..., Any]) -> bool:
    # callable objects are checked through their __call__ as well
    target = block if inspect.isroutine(block) else getattr(block, "__call__", block)
    return any(
        check(block) or check(target)
        for check in (
            inspect.iscoroutinefunction,
            inspect.isgeneratorfunction,
            inspect.isasyncgenfunction,
        )
    )


def _run_rebound(block: types.FunctionType, descriptor: Descriptor) -> None:
    bindings = {name: descriptor.slot(name) for name in descriptor.attribute_names()}
    namespace = dict(block.__globals__)
    namespace.update(bindings)

    closure = block.__closure__
    if closure:
        # enclosing-scope variables named like an attribute are shadowed too
        closure = tuple(
            types.CellType(bindings[name]) if name in bindings else cell
            for name, cell in zip(block.__code__.co_freevars, closure)
        )

    rebound = types.FunctionType(
        block.__code__,
        namespace,
        block.__name__,
        block.__defaults__,
        closure,
    )
    rebound.__kwdefaults__ = block.__kwdefaults__

    try:
        rebound()
    except UnboundLocalError:
        raise
    except NameError as exc:
        # only names looked up by the block itself are dispatched to the descriptor
        if not _raised_by(exc, block.__code__):
            raise
        name = getattr(exc, "name", None) or str(exc)
        raise unknown_attribute_error(
            name, type(descriptor).__name__, descriptor.attribute_names()
        ) from exc


def _raised_by(exc: BaseException, code: types.CodeType) -> bool:
    tb = exc.__traceback__
    if tb is None:
        return False
    while tb.tb_next is not None:
        tb = tb.tb_next
    return tb.tb_frame.f_code is code
