from config import Config, VMConfigError
from vm_sim import VirtualMemorySimulator, FatalVMError
import argparse
import os
import sys

def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Virtual Memory Simulator runner"
    )
    parser.add_argument(
        "-c", "--config",
        default="vm.config",
        help="Path to config file (default: %(default)s)",
    )
    parser.add_argument(
        "-t", "--trace",
        default="-",
        help='Trace file path (use "-" or omit to read from stdin; default: "%(default)s")',
    )
    group = parser.add_mutually_exclusive_group()
    group.add_argument(
        "-v", "--verbose",
        dest="verbose",
        action="store_true",
        help="Enable verbose output (default)",
    )
    group.add_argument(
        "-q", "--quiet",
        dest="verbose",
        action="store_false",
        help="Quiet mode, only print the statistics",
    )
    parser.set_defaults(verbose=True)
    return parser.parse_args(argv)

def main(argv=None):
    args = parse_args(argv)

    use_stdin = (args.trace == "-")

    # validation
    if not os.path.exists(args.config):
        print(f"error: config file not found: {args.config}", file=sys.stderr)
        sys.exit(2)

    if not use_stdin and not os.path.exists(args.trace):
        print(f"error: trace file not found: {args.trace}", file=sys.stderr)
        sys.exit(2)

    try:
        vm_config = Config.from_config_file(args.config)
    except VMConfigError as exc:
        print(f"error: invalid configuration: {exc}", file=sys.stderr)
        sys.exit(2)
    if args.verbose:
        print(vm_config)
    trace_path = "/dev/stdin" if use_stdin else args.trace
    try:
        simulator = VirtualMemorySimulator(vm_config)
    except FatalVMError as exc:
        print(f"fatal: {exc}", file=sys.stderr)
        sys.exit(1)
    try:
        simulator.simulate(trace_path, verbose=args.verbose)
    except FatalVMError as exc:
        # unrecoverable, report what we have and abort
        print(f"fatal: {exc}", file=sys.stderr)
        simulator.print_statistics(file=sys.stderr)
        sys.exit(1)
    except ValueError as exc:
        print(f"error: bad trace: {exc}", file=sys.stderr)
        sys.exit(2)
    finally:
        simulator.cleanup()


if __name__ == '__main__':
    main()
