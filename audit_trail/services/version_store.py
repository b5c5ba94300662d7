import logging
import threading
import uuid
from datetime import datetime, timezone

from audit_trail.models import VersionRecord
from audit_trail.schemas.version import VersionSummary
from audit_trail.services.diff import diff, word_count

logger = logging.getLogger(__name__)

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def _now() -> str:
    return datetime.now(timezone.utc).strftime(TIMESTAMP_FORMAT)


class VersionStore:
    """In-memory, ordered history of text versions.

    Diff fields are computed once, against whatever record was last at save
    time, and never recomputed when records are deleted.
    """

    def __init__(self) -> None:
        self._records: list[VersionRecord] = []
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def save(self, content: str) -> VersionSummary:
        with self._lock:
            previous = self._records[-1] if self._records else None
            if previous is None:
                # diff against empty text is the deduplicated token set
                word_diff = diff("", content)
                old_length = 0
            else:
                word_diff = diff(previous.content, content)
                old_length = previous.new_length

            record = VersionRecord(
                id=str(uuid.uuid4()),
                timestamp=_now(),
                content=content,
                added_words=word_diff.added_words,
                removed_words=word_diff.removed_words,
                old_length=old_length,
                new_length=word_count(content),
            )
            self._records.append(record)

        logger.info(
            "Version saved",
            extra={
                "version_id": record.id,
                "added": len(record.added_words),
                "removed": len(record.removed_words),
            },
        )
        return VersionSummary.model_validate(record)

    def list(self) -> list[VersionSummary]:
        with self._lock:
            records = list(self._records)
        return [VersionSummary.model_validate(r) for r in records]

    def get(self, version_id: str) -> VersionRecord | None:
        with self._lock:
            for record in self._records:
                if record.id == version_id:
                    return record
        return None

    def delete(self, version_id: str) -> bool:
        with self._lock:
            for index, record in enumerate(self._records):
                if record.id == version_id:
                    del self._records[index]
                    break
            else:
                logger.debug("Version not found for delete", extra={"version_id": version_id})
                return False

        logger.info("Version deleted", extra={"version_id": version_id})
        return True
