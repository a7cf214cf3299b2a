import argparse, sys, json
from .accessor import open_dataset, struct_to_json
from .catalog import list_sources, show_source_info, register_source, remove_source
from .config import RawFormat
from .exceptions import MetaCFError
from .utils import configure_logging

def _dump(obj):
    print(json.dumps(obj, indent=2, ensure_ascii=False, default=str))

def _subset_args(p):
    p.add_argument("--first", type=int, nargs="+", help="起始索引（从 1 开始）")
    p.add_argument("--last", type=int, nargs="+", help="结束索引（包含）")
    p.add_argument("--stride", type=int, nargs="+", help="步长")
    p.add_argument("--orient", default="ndarray", choices=["ndarray", "records", "split"])

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="metacf", description="metacf command‑line interface")
    sub = parser.add_subparsers(dest="cmd")

    # catalog
    sub.add_parser("ls", help="列出登记的数据源")
    p_info = sub.add_parser("info", help="数据源详情")
    p_info.add_argument("name")
    p_reg = sub.add_parser("register", help="登记数据源")
    p_reg.add_argument("name")
    p_reg.add_argument("source")
    p_reg.add_argument("--desc", default="")
    p_reg.add_argument("--format", choices=[f.value for f in RawFormat])
    p_reg.add_argument("--overwrite", action="store_true")
    p_rm = sub.add_parser("rm", help="删除登记")
    p_rm.add_argument("name")

    # dataset
    p_vars = sub.add_parser("vars", help="变量列表")
    p_vars.add_argument("ref")
    p_axes = sub.add_parser("axes", help="变量的坐标变量")
    p_axes.add_argument("ref")
    p_axes.add_argument("var")
    p_sn = sub.add_parser("stdname", help="按 standard_name 查变量")
    p_sn.add_argument("ref")
    p_sn.add_argument("value")
    p_grid = sub.add_parser("grid", help="坐标数据")
    p_grid.add_argument("ref")
    p_grid.add_argument("var")
    _subset_args(p_grid)
    p_struct = sub.add_parser("struct", help="坐标 + 变量数据")
    p_struct.add_argument("ref")
    p_struct.add_argument("var")
    _subset_args(p_struct)
    return parser

def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging()

    try:
        if args.cmd == "ls":
            for n in list_sources():
                print(n)
        elif args.cmd == "info":
            _dump(show_source_info(args.name))
        elif args.cmd == "register":
            _dump(register_source(args.name, args.source, description=args.desc,
                                  raw_format=args.format, overwrite=args.overwrite))
        elif args.cmd == "rm":
            remove_source(args.name)
        elif args.cmd in {"vars", "axes", "stdname", "grid", "struct"}:
            with open_dataset(args.ref) as ds:
                if args.cmd == "vars":
                    _dump(ds.variables)
                elif args.cmd == "axes":
                    _dump(ds.axes(args.var))
                elif args.cmd == "stdname":
                    _dump(ds.standard_name(args.value))
                else:
                    fetch = ds.grid if args.cmd == "grid" else ds.struct
                    s = fetch(args.var, args.first, args.last, args.stride)
                    _dump(struct_to_json(s, orient=args.orient))
        else:
            parser.print_help()
    except (MetaCFError, OSError) as e:
        print(f"metacf: {e}", file=sys.stderr)
        return 1
    return 0

if __name__ == "__main__":
    sys.exit(main())
