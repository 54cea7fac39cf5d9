#
# voice-skill-sdk
#
# (C) 2020, Deutsche Telekom AG
#
# This file is distributed under the terms of the MIT license.
# For details see the file LICENSE in the top directory.
#

#
# Handler arguments from the invocation context
#

import inspect
import logging
from functools import wraps
from typing import Any, Callable, Dict

from . import intents


logger = logging.getLogger(__name__)


def wants_context(param: inspect.Parameter) -> bool:
    """ True if the parameter is annotated as :py:class:`oxford_skill.intents.Context` (or a subclass) """
    annotation = param.annotation
    return isinstance(annotation, type) and issubclass(annotation, intents.Context)


def handler_signature(func: Callable[..., Any]) -> inspect.Signature:
    """ Signature of a handler, every parameter must have a type hint

    :param func:
    :return:
    :raises ValueError: if a parameter has no type hint
    """
    signature = inspect.signature(func)
    untyped = [name for name, param in signature.parameters.items() if param.annotation is inspect.Parameter.empty]
    if untyped:
        raise ValueError(f"Function {func.__name__} - parameter(s) {', '.join(untyped)} have no type hint defined")
    return signature


def handler_arguments(context: intents.Context, signature: inspect.Signature) -> Dict[str, Any]:
    """ Context for a parameter annotated as Context, slot value by parameter name for the others

    :param context:
    :param signature:
    :return:
    """
    return {name: context if wants_context(param) else context.get_slot(name)
            for name, param in signature.parameters.items()}


def intent_handler(func: Callable[..., Any]) -> Callable[..., Any]:
    """ Wrap a handler to be called with the invocation context

            @intent_handler
            def handler(context: Context, Word: str):
                ...

        The handler receives the context and the value of "Word" slot,
        a missing or empty slot is supplied as `None`.
        Called with anything but a context as first argument, the handler is called directly.

    :param func:
    :return:
    """
    func = getattr(func, '__wrapped__', func) if getattr(func, '__intent_handler__', False) else func
    signature = handler_signature(func)

    @wraps(func)
    def wrapper(*args, **kwargs):
        if args and isinstance(args[0], intents.Context):
            arguments = handler_arguments(args[0], signature)
            logger.debug('Calling %s with %s', func.__name__, repr(arguments))
            return func(**arguments)

        logger.debug('Direct call: "%s" args=%s kwargs=%s', func.__name__, args, kwargs)
        return func(*args, **kwargs)

    wrapper.__intent_handler__ = True
    return wrapper
