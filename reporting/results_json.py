"""test-results/results.json：本次运行的结果汇总，只写不读"""
import json
import time
from pathlib import Path


class ResultsRecorder:

    def __init__(self, path: Path):
        self.path = Path(path)
        self.started = time.time()
        self.tests: dict[str, dict] = {}

    def record(self, nodeid: str, outcome: str, duration: float, attempt: int = 1, tc_id: str = None,
               browser: str = None, error: str = ""):
        """同一用例多次 attempt 时，以最后一次结果为准，attempts 累加"""
        entry = self.tests.setdefault(nodeid, {"nodeid": nodeid, "tc_id": tc_id, "browser": browser, "attempts": []})
        entry["attempts"].append({"attempt": attempt, "outcome": outcome, "duration": round(duration, 2),
                                  "error": error})
        entry["outcome"] = outcome
        entry["duration"] = round(sum(a["duration"] for a in entry["attempts"]), 2)

    def summary(self) -> dict:
        totals: dict[str, int] = {}
        for entry in self.tests.values():
            totals[entry["outcome"]] = totals.get(entry["outcome"], 0) + 1
        return {
            "started": time.strftime("%Y-%m-%dT%H:%M:%S", time.localtime(self.started)),
            "duration": round(time.time() - self.started, 2),
            "totals": totals,
            "tests": list(self.tests.values()),
        }

    def write(self) -> Path:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(self.summary(), indent=2, ensure_ascii=False), encoding="utf-8")
        return self.path
