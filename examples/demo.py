#!/usr/bin/env python3
"""
Articut 使用示例

需要在 .env 中设置 ARTICUT_USERNAME 和 ARTICUT_API_KEY
"""

import asyncio
import sys

# 加载环境变量
from dotenv import load_dotenv
load_dotenv()

from articut import Articut, ArticutError, Level, RequestOptions


async def demo(text: str):
    """演示默认选项与 lv3 选项"""
    print("=" * 60)
    print("Articut 断词演示")
    print("=" * 60)
    print(f"\n输入文本:\n{text}\n")

    async with Articut() as articut:
        result = await articut.parse(text)
        print("断词结果 (lv2):")
        print("-" * 40)
        print(f"  {result.result_segmentation}")

        for tag in result.tokens():
            print(f"  {tag.text:10} {tag.pos}")

        result = await articut.parse(text, RequestOptions(level=Level.LV3))
        print("\n标注结果 (lv3):")
        print("-" * 40)
        for pos in result.result_pos:
            print(f"  {pos}")

        print(f"\n剩余字数: {result.word_count_balance}")


def main():
    """主函数"""
    text = " ".join(sys.argv[1:]) or "我想過過過兒過過的日子。"
    try:
        asyncio.run(demo(text))
    except ValueError as e:
        print(f"✗ 配置错误: {e}")
    except ArticutError as e:
        print(f"✗ API 调用失败: {e}")


if __name__ == "__main__":
    main()
