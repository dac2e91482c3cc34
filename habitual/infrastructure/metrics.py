"""API call metrics: cost records persisted through a StoragePort."""

from collections import defaultdict
from typing import Any, Dict, List

from habitual.domain.models import ApiCallRecord
from habitual.domain.pricing import create_api_call_record
from habitual.ports.outbound import StoragePort


class MetricsRecorder:
    """Appends API call records and summarizes token usage and cost."""

    def __init__(self, storage: StoragePort, key: str = "api_calls"):
        self._storage = storage
        self._key = key

    def record(
        self,
        model: str,
        input_tokens: int,
        output_tokens: int,
        operation: str = "chat",
    ) -> ApiCallRecord:
        record = create_api_call_record(model, input_tokens, output_tokens, operation)
        records = self._storage.load(self._key)
        records.append(record.to_dict())
        self._storage.save(self._key, records)
        return record

    def records(self) -> List[Dict[str, Any]]:
        return self._storage.load(self._key)

    def summary(self) -> Dict[str, Any]:
        records = self.records()
        by_operation: Dict[str, int] = defaultdict(int)
        for r in records:
            by_operation[r.get("operation", "chat")] += 1
        return {
            "calls": len(records),
            "input_tokens": sum(r.get("inputTokens", 0) for r in records),
            "output_tokens": sum(r.get("outputTokens", 0) for r in records),
            "total_cost": round(sum(r.get("cost", 0) for r in records), 6),
            "by_operation": dict(by_operation),
        }
