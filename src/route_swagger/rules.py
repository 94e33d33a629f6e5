"""Validation rule extraction from route handlers.

A handler opts into body/query documentation by taking a FormRequest
subclass as one of its parameters. The extractor resolves the handler
from its route action id, finds those parameters and collects their
rules.
"""

import importlib
import inspect
import logging
import typing
from abc import ABC, abstractmethod
from enum import Enum

logger = logging.getLogger(__name__)

RuleSet = dict[str, list[str]]


class FormRequest(ABC):
    """A request type that declares validation rules for its fields.

    ``rules()`` maps each field to its constraints, either as a
    ``"required|email"`` string or a list of tokens.
    """

    @abstractmethod
    def rules(self) -> dict:
        ...


class RuleMergePolicy(Enum):
    """How rules from several FormRequest parameters are combined."""

    LAST_WINS = "last"
    FIRST_WINS = "first"
    MERGE = "merge"


def parse_callback(identifier: str) -> tuple[str | None, str | None]:
    """Split ``Class@method`` or ``Class::method`` into its two halves."""
    for sep in ("@", "::"):
        if sep in identifier:
            class_path, _, method = identifier.partition(sep)
            if class_path and method:
                return class_path, method
    return None, None


def _import_object(path: str):
    """Import a module or class by dotted path, or return None."""
    parts = path.split(".")
    # Longest importable module prefix, then attribute lookups for the rest.
    for i in range(len(parts), 0, -1):
        module_name = ".".join(parts[:i])
        try:
            obj = importlib.import_module(module_name)
        except ImportError:
            continue
        except Exception as e:
            logger.debug("Importing %s failed: %r", module_name, e)
            return None
        try:
            for name in parts[i:]:
                obj = getattr(obj, name)
        except AttributeError:
            return None
        return obj if inspect.isclass(obj) or inspect.ismodule(obj) else None
    return None


def resolve_handler(identifier: str):
    """Return the handler for a route action id, or None.

    The part before ``@`` is either a class (``pkg.views.Users@show``)
    or a module holding a plain function (``pkg.views@show_user``).
    """
    owner_path, method = parse_callback(identifier)
    if not owner_path or not method:
        return None

    owner = _import_object(owner_path)
    if owner is None:
        logger.debug("Cannot import handler owner %s", owner_path)
        return None

    handler = getattr(owner, method, None)
    if not callable(handler):
        logger.debug("%s has no method %s", owner_path, method)
        return None
    return handler


def split_rules(rules) -> list[str]:
    if isinstance(rules, str):
        return rules.split("|") if rules else []
    return [str(r) for r in rules]


def normalize_rules(rules: dict) -> RuleSet:
    return {field: split_rules(value) for field, value in rules.items()}


def _annotations(handler) -> dict:
    try:
        return typing.get_type_hints(handler)
    except (NameError, TypeError):
        # Unresolvable forward references; fall back to what the signature holds.
        return {
            name: p.annotation
            for name, p in inspect.signature(handler).parameters.items()
        }


class RuleExtractor:
    """Collects the FormRequest rules declared by a route handler."""

    def __init__(self, merge_policy: RuleMergePolicy = RuleMergePolicy.LAST_WINS):
        self.merge_policy = merge_policy

    def extract(self, identifier: str) -> RuleSet:
        handler = resolve_handler(identifier)
        if handler is None:
            return {}

        hints = _annotations(handler)
        found: list[RuleSet] = []
        for name in inspect.signature(handler).parameters:
            annotation = hints.get(name)
            if not inspect.isclass(annotation) or annotation.__module__ == "builtins":
                continue
            if issubclass(annotation, FormRequest) and not inspect.isabstract(annotation):
                rules = self._form_rules(annotation)
                if rules is not None:
                    found.append(rules)

        return self._combine(found)

    @staticmethod
    def _form_rules(form_class: type[FormRequest]) -> RuleSet | None:
        try:
            return normalize_rules(form_class().rules())
        except Exception as e:
            logger.debug("Cannot read rules of %s: %r", form_class.__qualname__, e)
            return None

    def doc_comment(self, identifier: str) -> str:
        handler = resolve_handler(identifier)
        if handler is None:
            return ""
        return inspect.getdoc(handler) or ""

    def _combine(self, found: list[RuleSet]) -> RuleSet:
        if not found:
            return {}
        if self.merge_policy is RuleMergePolicy.FIRST_WINS:
            return found[0]
        if self.merge_policy is RuleMergePolicy.MERGE:
            merged: RuleSet = {}
            for rules in found:
                merged.update(rules)
            return merged
        return found[-1]
