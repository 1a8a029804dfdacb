"""
Articut 数据模型

RequestOptions: 请求选项（带固定默认值）
ArticutResult: 服务端返回结果
"""

from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Any, Iterator


class Level(str, Enum):
    """标注深度"""

    LV1 = "lv1"
    LV2 = "lv2"
    LV3 = "lv3"


class Pinyin(str, Enum):
    """拼音方案"""

    HANYU = "HANYU"
    BOPOMOFO = "BOPOMOFO"


@dataclass
class RequestOptions:
    """Articut 请求选项

    所有字段都有默认值，可单独设置。

    Example:
        options = RequestOptions(level=Level.LV3, wikidata=True)
        options = RequestOptions(level="lv1", pinyin="HANYU")
    """

    version: str = "latest"
    level: Level = Level.LV2
    user_dict: dict[str, Any] = field(default_factory=dict)  # 词 -> 标签
    opendata_place: bool = False
    wikidata: bool = False
    chemical: bool = False
    emoji: bool = False
    time_ref: str = ""
    pinyin: Pinyin = Pinyin.BOPOMOFO

    def __setattr__(self, name, value):
        # 构造和后续赋值都要校验，未知取值抛出 ValueError
        if name == "level":
            value = Level(value)
        elif name == "pinyin":
            value = Pinyin(value)
        super().__setattr__(name, value)

    def to_dict(self) -> dict:
        """转换为请求体字段（扁平结构）"""
        return {
            "version": self.version,
            "level": self.level.value,
            "user_defined_dict_file": dict(self.user_dict),
            "opendata_place": self.opendata_place,
            "wikidata": self.wikidata,
            "chemical": self.chemical,
            "emoji": self.emoji,
            "time_ref": self.time_ref,
            "pinyin": self.pinyin.value,
        }


@dataclass(frozen=True)
class PosTag:
    """标注对象"""
    pos: str       # 词性标记
    text: str      # 原文片段


def _expect(data: dict, key: str, types: tuple, default):
    """取出字段并校验类型，缺失时返回默认值

    bool 不算作数字。
    """
    if key not in data:
        return default
    value = data[key]
    if isinstance(value, bool) and bool not in types:
        raise TypeError(f"{key} must be {types[0].__name__}, got bool")
    if not isinstance(value, types):
        raise TypeError(f"{key} must be {types[0].__name__}, got {type(value).__name__}")
    return value


def _parse_pos_tag(item) -> PosTag:
    if not isinstance(item, dict):
        raise TypeError(f"result_obj item must be an object, got {type(item).__name__}")
    for key in ("pos", "text"):
        if key not in item:
            raise KeyError(key)
    return PosTag(pos=_expect(item, "pos", (str,), ""), text=_expect(item, "text", (str,), ""))


@dataclass(frozen=True)
class ArticutResult:
    """Articut 返回结果

    由服务端 JSON 构造，构造后不可修改。服务端的 msg 字段只用于错误映射，
    不保存在结果中。
    """

    version: str = ""
    level: Level = Level.LV2
    exec_time: float = 0.0
    result_pos: tuple[str, ...] = ()
    result_obj: tuple[tuple[PosTag, ...], ...] = ()
    result_segmentation: str = ""
    word_count_balance: int = 0

    @classmethod
    def from_dict(cls, data: dict) -> "ArticutResult":
        """从服务端 JSON 构造结果

        缺失字段使用默认值，存在的字段必须符合类型（null 也不接受）。

        Raises:
            TypeError: 字段类型不符合结构
            KeyError: 标注对象缺少 pos 或 text
            ValueError: level 取值未知
        """
        if not isinstance(data, dict):
            raise TypeError(f"Expected a JSON object, got {type(data).__name__}")

        result_pos = _expect(data, "result_pos", (list,), [])
        for pos in result_pos:
            if not isinstance(pos, str):
                raise TypeError(f"result_pos items must be str, got {type(pos).__name__}")

        result_obj = []
        for group in _expect(data, "result_obj", (list,), []):
            if not isinstance(group, list):
                raise TypeError(f"result_obj groups must be list, got {type(group).__name__}")
            result_obj.append(tuple(_parse_pos_tag(item) for item in group))

        return cls(
            version=_expect(data, "version", (str,), ""),
            level=Level(_expect(data, "level", (str,), Level.LV2.value)),
            exec_time=float(_expect(data, "exec_time", (float, int), 0.0)),
            result_pos=tuple(result_pos),
            result_obj=tuple(result_obj),
            result_segmentation=_expect(data, "result_segmentation", (str,), ""),
            word_count_balance=_expect(data, "word_count_balance", (int,), 0),
        )

    def tokens(self) -> Iterator[PosTag]:
        """按顺序遍历所有标注对象"""
        for group in self.result_obj:
            yield from group

    def to_tsv(self, output_path: str) -> None:
        """导出为 TSV 格式

        格式: 词\t词性
        """
        with open(output_path, 'w', encoding='utf-8') as f:
            f.write("词\t词性\n")
            for tag in self.tokens():
                f.write(f"{tag.text}\t{tag.pos}\n")

    def to_dict(self) -> dict:
        """转换为字典"""
        data = {f.name: getattr(self, f.name) for f in fields(self)}
        data["level"] = self.level.value
        data["result_pos"] = list(self.result_pos)
        data["result_obj"] = [
            [{"pos": tag.pos, "text": tag.text} for tag in group]
            for group in self.result_obj
        ]
        return data
