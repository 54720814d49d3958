from dataclasses import dataclass, field
from datetime import datetime

from config import TIMESTAMP_FORMAT


@dataclass
class ChatRecord:
    ciphertext: str
    plaintext: str
    received_at: datetime = field(default_factory=datetime.now)

    def render(self) -> str:
        timestamp = self.received_at.strftime(TIMESTAMP_FORMAT)
        return f"{timestamp} message received: ({self.ciphertext}) {self.plaintext}"
