"""Source-code dialects for the packed font bytes.

Every writer renders the same tokens; the converter decides their order.
"""
from fontbitmap.config import ConfigError, OutputFormat


class ByteWriter:
    def begin(self, timestamp):
        raise NotImplementedError

    def begin_array(self, name):
        raise NotImplementedError

    def begin_array_row(self):
        raise NotImplementedError

    def byte(self, byte):
        raise NotImplementedError

    def comment(self, comment):
        raise NotImplementedError

    def line_break(self):
        return "\n"

    def end_array(self):
        raise NotImplementedError

    def end(self):
        return "\n\n"


class CCodeGenerator(ByteWriter):
    def begin(self, timestamp):
        return f"//\n// Font Data\n// Created: {timestamp}\n//\n"

    def begin_array(self, name):
        return f"\n\nconst unsigned char {name}[] = {{\n"

    def begin_array_row(self):
        return "\t"

    def byte(self, byte):
        return f"0x{byte:02X},"

    def comment(self, comment):
        return f" // {comment}"

    def end_array(self):
        return "};\n"


class ArduinoCodeGenerator(CCodeGenerator):
    def begin(self, timestamp):
        return super().begin(timestamp) + "\n#include <Arduino.h>\n"

    def begin_array(self, name):
        return f"\n\nconst uint8_t {name}[] PROGMEM = {{\n"


class PythonListCodeGenerator(ByteWriter):
    def begin(self, timestamp):
        return f"#\n# Font Data\n# Created: {timestamp}\n#\n"

    def begin_array(self, name):
        return f"\n\n{name} = [\n"

    def begin_array_row(self):
        return "    "

    def byte(self, byte):
        return f"0x{byte:02x},"

    def comment(self, comment):
        return f" # {comment}"

    def end_array(self):
        return "]\n"


class PythonBytesCodeGenerator(PythonListCodeGenerator):
    """One b'...' literal per glyph, joined by line continuations.

    There is nowhere to put a comment inside the chain, so comment() only
    closes the row's literal.
    """

    def begin_array(self, name):
        return f"\n\n{name} = b'' \\\n"

    def begin_array_row(self):
        return "    b'"

    def byte(self, byte):
        return f"\\x{byte:02x}"

    def comment(self, comment):
        return "' \\"

    def end_array(self):
        # terminates the continuation left open by the last row
        return "    b''\n"


WRITERS = {
    OutputFormat.C: CCodeGenerator,
    OutputFormat.ARDUINO: ArduinoCodeGenerator,
    OutputFormat.PYTHON_LIST: PythonListCodeGenerator,
    OutputFormat.PYTHON_BYTES: PythonBytesCodeGenerator,
}


def writer_for(output_format):
    try:
        return WRITERS[output_format]()
    except KeyError:
        raise ConfigError(f"no source code writer for {output_format!r}") from None
