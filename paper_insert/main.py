import argparse
import asyncio
import sys

import yaml

from paper_insert.core.common.logger import logger
from paper_insert.core.config import Config
from paper_insert.core.operators.sink import TextDocument
from paper_insert.core.operators.storage import SettingsStore
from paper_insert.core.workflow import InsertPaperCommand, RetrievalPipeline


def load_config(config_path: str | None) -> Config:
    if config_path is None:
        return Config()
    return Config.from_yaml(config_path)


async def run_get(config: Config, paper_id: str, document_path: str | None, cursor: int | None) -> int:
    """检索论文，输出到 stdout 或插入到文档光标处"""
    store = SettingsStore(str(config.settings_path))
    command = InsertPaperCommand(RetrievalPipeline.from_config(config), store)

    if document_path is None:
        document = TextDocument()
        if not await command.run(document, paper_id):
            return 1
        print(document.text)
        return 0

    document = TextDocument.from_file(document_path, cursor=cursor)
    if not await command.run(document, paper_id):
        return 1
    document.save()
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="paper-insert", description="Insert arXiv paper metadata by ID")
    parser.add_argument("--config", type=str, default=None, help="YAML 配置文件")
    subparsers = parser.add_subparsers(dest="command", required=True)

    get_parser = subparsers.add_parser("get", help="按 ID 获取 arXiv 论文")
    get_parser.add_argument("paper_id", type=str)
    get_parser.add_argument("--document", type=str, default=None, help="插入到该文件")
    get_parser.add_argument("--cursor", type=int, default=None, help="插入位置，默认文件末尾")

    subparsers.add_parser("show-template", help="显示当前模板")

    set_parser = subparsers.add_parser("set-template", help="设置插入模板")
    set_parser.add_argument("template", type=str, help="模板，可使用 \\n 表示换行")

    return parser


def run_command(args: argparse.Namespace) -> int:
    config = load_config(args.config)
    store = SettingsStore(str(config.settings_path))

    if args.command == "get":
        return asyncio.run(run_get(config, args.paper_id, args.document, args.cursor))

    if args.command == "show-template":
        print(store.load().template)
        return 0

    template = args.template.replace("\\n", "\n")
    store.update_template(template)
    logger.info(f"模板已保存到 {store.path}")
    return 0


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        return run_command(args)
    except (ValueError, yaml.YAMLError) as e:
        # 光标越界、设置文件格式错误等
        logger.error(f"命令执行失败: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
