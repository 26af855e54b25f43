from dataclasses import dataclass
from typing import Any, Optional

from framework.errors import ElementLookupError


@dataclass(frozen=True)
class LocateResult:
    """Author: taobo.zhou
    中文：元素查找结果，要么是元素，要么是查找错误，由调用方决定重试、等待或失败。
    English: Element lookup outcome, either an element or an ElementLookupError.
    """

    element: Optional[Any] = None
    error: Optional[ElementLookupError] = None

    @property
    def found(self) -> bool:
        return self.error is None

    def unwrap(self):
        if self.error is not None:
            raise self.error
        return self.element
