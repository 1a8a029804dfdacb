"""
命令行入口
"""

import argparse
import asyncio
import json
import os
import sys
from pathlib import Path

from dotenv import load_dotenv

from .base import Level, Pinyin, RequestOptions
from .clients.articut_client import Articut
from .exceptions import ArticutError


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Articut 中文断词/标注"
    )
    parser.add_argument(
        "text",
        nargs="?",
        help="要处理的文本（或使用 --file 指定文件）"
    )
    parser.add_argument(
        "-f", "--file",
        type=Path,
        help="输入文件路径"
    )
    parser.add_argument(
        "-l", "--level",
        choices=[level.value for level in Level],
        default=Level.LV2.value,
        help="标注深度 (默认: lv2)"
    )
    parser.add_argument(
        "--pinyin",
        choices=[p.value for p in Pinyin],
        default=Pinyin.BOPOMOFO.value,
        help="拼音方案 (默认: BOPOMOFO)"
    )
    parser.add_argument(
        "--api-version",
        default="latest",
        help="Articut 版本 (默认: latest)"
    )
    parser.add_argument(
        "--user-dict",
        type=Path,
        help="自定义词典 JSON 文件 ({词: [标签]})"
    )
    parser.add_argument("--opendata-place", action="store_true", help="查询开放数据地名")
    parser.add_argument("--wikidata", action="store_true", help="查询 Wikidata")
    parser.add_argument("--chemical", action="store_true", help="识别化学名词")
    parser.add_argument("--emoji", action="store_true", help="处理 emoji")
    parser.add_argument(
        "--time-ref",
        default="",
        help="时间参照点"
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="以 JSON 输出完整结果"
    )
    parser.add_argument(
        "-o", "--output",
        type=Path,
        help="输出 TSV 文件路径"
    )
    return parser


def main(argv: list[str] | None = None):
    """CLI 主入口"""
    load_dotenv()

    args = build_parser().parse_args(argv)

    # 获取输入文本
    if args.file:
        if not args.file.exists():
            print(f"错误: 文件不存在 - {args.file}")
            sys.exit(1)
        text = args.file.read_text(encoding="utf-8")
    elif args.text:
        text = args.text
    else:
        # 从 stdin 读取
        text = sys.stdin.read()

    if not text.strip():
        print("错误: 未提供输入文本")
        sys.exit(1)

    user_dict = {}
    if args.user_dict:
        if not args.user_dict.exists():
            print(f"错误: 文件不存在 - {args.user_dict}")
            sys.exit(1)
        try:
            user_dict = json.loads(args.user_dict.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            print(f"错误: 自定义词典不是合法 JSON - {args.user_dict}: {e}")
            sys.exit(1)
        if not isinstance(user_dict, dict):
            print(f"错误: 自定义词典必须是 JSON 对象 - {args.user_dict}")
            sys.exit(1)

    options = RequestOptions(
        version=args.api_version,
        level=args.level,
        user_dict=user_dict,
        opendata_place=args.opendata_place,
        wikidata=args.wikidata,
        chemical=args.chemical,
        emoji=args.emoji,
        time_ref=args.time_ref,
        pinyin=args.pinyin,
    )

    try:
        result = asyncio.run(_parse(text, options))
    except ValueError as e:
        print(f"配置错误: {e}")
        sys.exit(1)
    except ArticutError as e:
        if e.server_message:
            print(f"Articut 调用失败: {e} (服务端: {e.server_message})")
        else:
            print(f"Articut 调用失败: {e}")
        sys.exit(1)

    if args.json:
        print(json.dumps(result.to_dict(), ensure_ascii=False, indent=2))
    else:
        print(result.result_segmentation)
        print(f"剩余字数: {result.word_count_balance}")

    if args.output:
        result.to_tsv(str(args.output))
        print(f"✓ 标注表已保存到: {args.output}")


async def _parse(text: str, options: RequestOptions):
    async with Articut(url=os.getenv("ARTICUT_URL")) as articut:
        return await articut.parse(text, options)


if __name__ == "__main__":
    main()
