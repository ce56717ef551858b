"""测试数据：账号、商品、收货人信息、排序选项

数据来自 data/fixture_data.json，进程内只读取一次，之后只读。
"""
import json
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType

FIXTURE_FILE = Path(__file__).resolve().parent / "fixture_data.json"

REQUIRED_SECTIONS = ("credentials", "products", "customerInfo", "sortOptions")


def _freeze(value):
    """dict -> MappingProxyType，list -> tuple，递归处理"""
    if isinstance(value, dict):
        return MappingProxyType({k: _freeze(v) for k, v in value.items()})
    if isinstance(value, list):
        return tuple(_freeze(v) for v in value)
    return value


@lru_cache(maxsize=None)
def load_fixture_data(path: Path = FIXTURE_FILE):
    raw = json.loads(Path(path).read_text(encoding="utf-8"))
    missing = [s for s in REQUIRED_SECTIONS if s not in raw]
    if missing:
        raise ValueError(f"测试数据缺少字段：{missing}（{path}）")
    return _freeze(raw)


FIXTURE_DATA = load_fixture_data()

CREDENTIALS = FIXTURE_DATA["credentials"]
PRODUCTS = FIXTURE_DATA["products"]
CUSTOMER_INFO = FIXTURE_DATA["customerInfo"]
SORT_OPTIONS = FIXTURE_DATA["sortOptions"]
