"""Proxy: a stand-in that controls access to the real subject."""
from abc import ABC, abstractmethod
from typing import List

from pattern_catalog.domain.base.validation import require_instance
from pattern_catalog.domain.example import PatternCategory, PatternExample


class Subject(ABC):
    @abstractmethod
    def request(self) -> List[str]:
        pass


class RealSubject(Subject):
    def request(self) -> List[str]:
        return ["RealSubject: Handling request."]


class Proxy(Subject):
    """Wraps a RealSubject and runs extra work before and after each request."""

    def __init__(self, real_subject: RealSubject):
        self._real_subject = require_instance(real_subject, RealSubject, "real_subject")

    def request(self) -> List[str]:
        lines = self._pre_request()
        lines.extend(self._real_subject.request())
        lines.extend(self._post_request())
        return lines

    def _pre_request(self) -> List[str]:
        return ["Proxy: Performing pre-request tasks."]

    def _post_request(self) -> List[str]:
        return ["Proxy: Performing post-request tasks."]


def execute() -> List[str]:
    proxy = Proxy(RealSubject())
    return proxy.request()


EXAMPLE = PatternExample(
    name="proxy",
    execute=execute,
    category=PatternCategory.STRUCTURAL,
    summary="Provide a surrogate that controls access to another object",
)
