"""Command line interface: directory, host and port scanning."""

from __future__ import annotations

import argparse
import sys

from .dirscan import dir_scan
from .hostscan import host_scan
from .parseargs import parse_cidr, parse_port
from .portscan import port_scan

DESCRIPTION = """
you can quick start with command like
vidarscan dir -u "excample.com" -d ./dicfile.txt
this is for path scan
通过上面指令可以进行路径扫描，dir可替换为其他可用功能"""


def _run_dir(args: argparse.Namespace) -> int:
    print("[INFO] 开始目录扫描...")
    print(f"[INFO] 目标 URL: {args.url}")
    print(f"[INFO] 使用字典: {args.dict}")
    try:
        dir_scan(args.url, args.dict)
    except OSError as exc:
        print(f"error: {exc}")
        return 1
    print("[INFO] 目录扫描结束。")
    return 0


def _run_host(args: argparse.Namespace) -> int:
    try:
        start_ip, end_ip = parse_cidr(args.ip)
    except ValueError as exc:
        print(exc)
        return 1
    print("[INFO] 开始Host扫描...")
    print(f"[INFO] Host范围: {start_ip}-{end_ip}")
    host_scan(start_ip, end_ip)
    print("[INFO] Host扫描结束。")
    return 0


def _run_port(args: argparse.Namespace) -> int:
    try:
        start_port, end_port = parse_port(args.port)
    except ValueError as exc:
        print(exc)
        return 1
    print("[INFO] 开始端口扫描...")
    print(f"[INFO] 目标 URL: {args.url}")
    print(f"[INFO] 端口范围: {start_port}-{end_port}")
    port_scan(args.url, start_port, end_port)
    print("[INFO] 端口扫描结束。")
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with its ``dir``, ``host`` and ``port`` commands."""
    parser = argparse.ArgumentParser(
        prog="vidarscan",
        description=DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("-t", "--toggle", action="store_true", help="Help message for toggle")
    commands = parser.add_subparsers(dest="command", metavar="command")

    dir_cmd = commands.add_parser("dir", help="dir scanning")
    dir_cmd.add_argument("-u", "--url", default="", help="Target URL (required)")
    dir_cmd.add_argument("-d", "--dict", required=True, help="Dictionary Path (required)")
    dir_cmd.set_defaults(handler=_run_dir)

    host_cmd = commands.add_parser("host", help="host scanning")
    host_cmd.add_argument("-i", "--ip", required=True, help="Target IPv4 (required)")
    host_cmd.set_defaults(handler=_run_host)

    port_cmd = commands.add_parser("port", help="port scanning")
    port_cmd.add_argument("-u", "--url", required=True, help="Target URL (required)")
    port_cmd.add_argument("-p", "--port", default="0-65535", help="Port range")
    port_cmd.set_defaults(handler=_run_port)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the command line and return the exit status."""
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except SystemExit as exc:
        return 0 if exc.code in (0, None) else 1
    if args.command is None:
        parser.print_help()
        return 0
    return args.handler(args)


if __name__ == "__main__":
    sys.exit(main())