READ_INT = "R"
READ_FLOAT = "RF"
WRITE_INT = "W"
WRITE_FLOAT = "WF"

READ_OPS = {READ_INT, READ_FLOAT}
WRITE_OPS = {WRITE_INT, WRITE_FLOAT}


def hex_to_int(hex_string):
    return int(hex_string, 16)

def parse_int_value(value_string):
    # base 0 accepts 42, -7, 0x2a
    return int(value_string, 0)


class TraceOperation:
    def __init__(self, operation, address, value=None, hex_string=None):
        self.operation = operation
        self.address = address
        self.value = value
        self.hex_string = hex_string

    @property
    def is_write(self):
        return self.operation in WRITE_OPS

    def __iter__(self):
        # allows: operation, address, value = op
        return iter((self.operation, self.address, self.value))


class TraceParser:
    """
    Parses a trace file and yields TraceOperation objects.

    Each line is OP:HEXADDR for reads (R, RF) and OP:HEXADDR:VALUE for writes (W, WF).
    Blank lines and lines starting with '#' are skipped.
    """
    def __init__(self, trace_file, addr_bits=32):
        self.addr_bits = addr_bits
        self.trace_file = trace_file
        with open(trace_file, 'r') as f:
            self.lines = f.readlines()
        self._mask = (1 << self.addr_bits) - 1

    @staticmethod
    def parse_line(line, lineno=None):
        """
        Parse one trace line
        :param line: str
        :param lineno: int or None, used in error messages
        :return: TraceOperation, or None for blank and comment lines
        """
        where = f"line {lineno}" if lineno is not None else "trace line"
        line = line.strip()
        if not line or line.startswith("#"):
            return None
        parts = [part.strip() for part in line.split(":")]
        operation = parts[0].upper()
        if operation not in READ_OPS and operation not in WRITE_OPS:
            raise ValueError(f"{where}: unknown op: {parts[0]}")
        if len(parts) < 2 or not parts[1]:
            raise ValueError(f"{where}: missing address")
        hex_string = parts[1]
        try:
            address = hex_to_int(hex_string)
        except ValueError:
            raise ValueError(f"{where}: bad address: {hex_string}") from None

        value = None
        if operation in WRITE_OPS:
            if len(parts) < 3 or not parts[2]:
                raise ValueError(f"{where}: {operation} needs a value")
            try:
                value = parse_int_value(parts[2]) if operation == WRITE_INT else float(parts[2])
            except ValueError:
                raise ValueError(f"{where}: bad value: {parts[2]}") from None
        elif len(parts) > 2:
            raise ValueError(f"{where}: {operation} takes no value")
        return TraceOperation(operation, address, value, hex_string)

    def __iter__(self):
        # iterate over each line and yield relevant info
        for lineno, line in enumerate(self.lines, start=1):
            trace_op = self.parse_line(line, lineno)
            if trace_op is None:
                continue
            if trace_op.address > self._mask:
                raise ValueError(f"line {lineno}: address {trace_op.hex_string} exceeds {self.addr_bits} bits")
            yield trace_op
