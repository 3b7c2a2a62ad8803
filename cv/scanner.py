from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional

from backend.models.identity import IdentityRecord
from cv.utils.throttle import ScanThrottle

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScanResult:
    raw: str
    record: IdentityRecord
    frames_seen: int


class ScanSession:
    """
    Continuous scan that stops on the first usable string.
    Frames arriving faster than the throttle allows are skipped, not decoded.
    With region set, only that box of each frame (plus pad) is decoded.
    """

    def __init__(
        self,
        reader,
        throttle: Optional[ScanThrottle] = None,
        on_frame=None,
        region: Optional[Callable[..., List[int]]] = None,
        pad: int = 12,
    ):
        self.reader = reader
        self.throttle = throttle or ScanThrottle()
        self.on_frame = on_frame
        self.region = region
        self.pad = pad
        self.result: Optional[ScanResult] = None

    def _decode(self, frame):
        if self.region is None:
            return self.reader.decode_bgr(frame)
        return self.reader.decode_roi(frame, self.region(frame), pad=self.pad)

    def run(self, frames: Iterable) -> Optional[ScanResult]:
        self.result = None
        self.throttle.reset()
        for i, frame in enumerate(frames, start=1):
            if self.on_frame is not None and self.on_frame(frame) is False:
                logger.info("scan cancelled after %d frames", i)
                return None
            if not self.throttle.ready():
                continue
            raw, record = self._decode(frame)
            if raw:
                self.result = ScanResult(raw=raw, record=record, frames_seen=i)
                logger.info("QR decoded after %d frames", i)
                return self.result
        return None
