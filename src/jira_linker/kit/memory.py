from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional

@dataclass
class RecordingHost:
    """In-memory pull request host that records every annotation posted."""
    title: Optional[str] = ""
    commit_messages: List[str] = field(default_factory=list)
    messages: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    failures: List[str] = field(default_factory=list)
    calls: List[str] = field(default_factory=list)

    def get_pull_request_title(self) -> str:
        self.calls.append("get_pull_request_title")
        return self.title or ""

    def get_commit_messages(self) -> List[str]:
        self.calls.append("get_commit_messages")
        return list(self.commit_messages)

    def post_message(self, text: str) -> None:
        self.calls.append("post_message")
        self.messages.append(text)

    def post_warning(self, text: str) -> None:
        self.calls.append("post_warning")
        self.warnings.append(text)

    def post_failure(self, text: str) -> None:
        self.calls.append("post_failure")
        self.failures.append(text)

    @property
    def failed(self) -> bool:
        return bool(self.failures)
