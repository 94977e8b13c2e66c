"""
HEX Block Codec v1

A single-file Python CLI tool that turns hexadecimal text into an image made
of 8x8 solid-colour blocks (three bytes per block) and recovers the bytes from
such an image. Raster output is PNG via Pillow, vector output is SVG via
svgwrite.

Usage:
    cat hexfile.txt | python hexblocks.py -b 16 > output.png
    cat hexfile.txt | python hexblocks.py -b 16 -v > output.svg
    cat output.png | python hexblocks.py -d > output.txt
    cat output.svg | python hexblocks.py -d -v > output.txt

Trailing zero bytes are indistinguishable from block padding, so decoding
drops them: a payload ending in 00 does not round-trip.
"""

import argparse
import binascii
import io
import json
import math
import os
import re
import sys
from typing import Callable, Dict, List, Optional, Tuple, Union
from xml.etree import ElementTree

import svgwrite
from PIL import Image, ImageColor, ImageDraw


# Edge length of one block in pixels.
PIXEL_SIZE: int = 8

# Payload bytes carried by one block (R, G, B).
BYTES_PER_BLOCK: int = 3

Color = Tuple[int, int, int]


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------
class CodecError(Exception):
    """Base class for every error raised while encoding or decoding."""


class InputReadError(CodecError):
    """Standard input could not be read."""


class FormatError(CodecError, ValueError):
    """Hex text has an odd length or contains non-hex characters."""


class ImageDecodeError(CodecError):
    """A PNG or SVG container could not be turned back into blocks."""


class ImageEncodeError(CodecError):
    """A PNG container could not be written."""


# ---------------------------------------------------------------------------
# Geometry
# ---------------------------------------------------------------------------
class Geometry:
    """Grid and canvas dimensions for one payload.

    Instances are created by :class:`GeometryPlanner` and never change.

    Attributes:
        byte_length: Number of payload bytes.
        block_count: Number of blocks, ceil(byte_length / 3).
        blocks_per_row: Blocks in each row of the grid.
        rows: Number of block rows.
        width: Canvas width in pixels.
        height: Canvas height in pixels.
    """

    def __init__(self, byte_length: int, block_count: int, blocks_per_row: int, rows: int) -> None:
        """Initialise the geometry from its block-unit dimensions.

        Args:
            byte_length: Number of payload bytes.
            block_count: Number of blocks.
            blocks_per_row: Blocks per row (already normalised).
            rows: Number of block rows.
        """
        self._byte_length: int = byte_length
        self._block_count: int = block_count
        self._blocks_per_row: int = blocks_per_row
        self._rows: int = rows

    @property
    def byte_length(self) -> int:
        """Return the payload length in bytes."""
        return self._byte_length

    @property
    def block_count(self) -> int:
        """Return the number of blocks."""
        return self._block_count

    @property
    def blocks_per_row(self) -> int:
        """Return the number of blocks per row."""
        return self._blocks_per_row

    @property
    def rows(self) -> int:
        """Return the number of block rows."""
        return self._rows

    @property
    def width(self) -> int:
        """Return the canvas width in pixels."""
        return self._blocks_per_row * PIXEL_SIZE

    @property
    def height(self) -> int:
        """Return the canvas height in pixels."""
        return self._rows * PIXEL_SIZE

    def block_origin(self, index: int) -> Tuple[int, int]:
        """Return the top-left pixel of the block at a linear index.

        Blocks fill the grid in row-major order.

        Args:
            index: Zero-based block index.

        Returns:
            An (x, y) tuple of pixel coordinates.

        Raises:
            IndexError: If index is outside [0, block_count).
        """
        if not 0 <= index < self._block_count:
            raise IndexError(f"Block index {index} outside [0, {self._block_count})")
        column = index % self._blocks_per_row
        row = index // self._blocks_per_row
        return (column * PIXEL_SIZE, row * PIXEL_SIZE)

    def __repr__(self) -> str:
        return (f"Geometry(blocks={self._block_count}, blocks_per_row={self._blocks_per_row}, "
                f"rows={self._rows}, canvas={self.width}x{self.height})")


class GeometryPlanner:
    """Derives the block grid for a payload length and a requested row width."""

    def plan(self, byte_length: int, blocks_per_row: int = 0) -> Geometry:
        """Compute the geometry for a payload.

        A blocks_per_row of zero or less lays every block out in a single
        row. An empty payload yields zero blocks and a zero-sized canvas.

        Args:
            byte_length: Number of payload bytes (>= 0).
            blocks_per_row: Requested blocks per row.

        Returns:
            The resulting :class:`Geometry`.
        """
        block_count = math.ceil(byte_length / BYTES_PER_BLOCK)
        if blocks_per_row <= 0:
            blocks_per_row = block_count
        rows = math.ceil(block_count / blocks_per_row) if block_count > 0 else 0
        return Geometry(byte_length, block_count, blocks_per_row, rows)


# ---------------------------------------------------------------------------
# BlockPacker / ByteUnpacker
# ---------------------------------------------------------------------------
class BlockPacker:
    """Splits a byte sequence into one RGB colour per block."""

    def pack(self, data: bytes) -> List[Color]:
        """Group bytes into (R, G, B) triples.

        A final group shorter than three bytes is zero-filled.

        Args:
            data: The payload bytes.

        Returns:
            One colour per block, in block order.
        """
        data = bytes(data)
        colors: List[Color] = []
        for offset in range(0, len(data), BYTES_PER_BLOCK):
            chunk = data[offset:offset + BYTES_PER_BLOCK]
            chunk += bytes(BYTES_PER_BLOCK - len(chunk))
            colors.append((chunk[0], chunk[1], chunk[2]))
        return colors


class ByteUnpacker:
    """Flattens block colours back into bytes."""

    def unpack(self, colors: List[Color]) -> bytes:
        """Concatenate colour channels and strip trailing zero bytes.

        Args:
            colors: Block colours in block order.

        Returns:
            The recovered payload.
        """
        data = bytearray()
        for color in colors:
            data.extend(color[:BYTES_PER_BLOCK])
        return bytes(data).rstrip(b"\x00")


# ---------------------------------------------------------------------------
# HexFraming
# ---------------------------------------------------------------------------
class HexFraming:
    """Conversion between hex text and bytes.

    Input text may be split by spaces and line breaks and may use either
    case. Output text is lower-case and ends with a single newline.
    """

    # Separators removed before decoding; any other whitespace is invalid.
    _SEPARATORS: bytes = b" \n\r"

    def decode(self, text: Union[bytes, str]) -> bytes:
        """Parse hex text into bytes.

        Args:
            text: Hex digits, optionally separated by spaces or line breaks.

        Returns:
            The decoded bytes.

        Raises:
            FormatError: If the text has an odd number of digits or contains
                a non-hex character.
        """
        if isinstance(text, str):
            text = text.encode("utf-8")
        digits = bytes(text).translate(None, self._SEPARATORS)
        try:
            return binascii.unhexlify(digits)
        except (binascii.Error, ValueError) as e:
            raise FormatError(f"decoding hex: {e}") from e

    def encode(self, data: bytes) -> str:
        """Format bytes as lower-case hex followed by a newline."""
        return bytes(data).hex() + "\n"


# ---------------------------------------------------------------------------
# Canvas back-ends
# ---------------------------------------------------------------------------
class CanvasBackend:
    """Interface shared by the PNG and SVG containers.

    A back-end draws solid squares onto a canvas and serialises it. For
    reading, a pixel-grid back-end (``grid_sampled``) opens the canvas for
    :class:`BlockSampler` to scan; any other back-end lists its fill colours
    itself.
    """

    name: str = ""

    # True when blocks are recovered by sampling pixels on the block grid.
    grid_sampled: bool = False

    def begin(self, width: int, height: int) -> None:
        """Start a new blank canvas of width x height pixels."""
        raise NotImplementedError

    def fill_block(self, x: int, y: int, size: int, color: Color) -> None:
        """Paint an opaque size x size square with its top-left at (x, y)."""
        raise NotImplementedError

    def serialize(self) -> bytes:
        """Return the finished canvas as container bytes."""
        raise NotImplementedError

    def read_canvas(self, source: bytes) -> Tuple[int, int, Callable[[int, int], Color]]:
        """Open a serialised canvas as (width, height, pixel lookup)."""
        raise NotImplementedError

    def read_fills(self, source: bytes) -> List[Color]:
        """Return the fill colour of every block of a serialised canvas, in block order."""
        raise NotImplementedError


class RasterBackend(CanvasBackend):
    """PNG container drawn with Pillow.

    PNG cannot hold a zero-sized image, so an empty canvas is written as
    opaque black pixels at least one pixel wide and high. Black samples
    decode to zero bytes, which are trimmed.
    """

    name: str = "png"
    grid_sampled: bool = True

    def __init__(self) -> None:
        """Initialise the back-end with no canvas."""
        self._image: Optional[Image.Image] = None
        self._draw: Optional[ImageDraw.ImageDraw] = None

    def begin(self, width: int, height: int) -> None:
        """Create an RGB canvas of width x height pixels."""
        self._image = Image.new("RGB", (max(width, 1), max(height, 1)), (0, 0, 0))
        self._draw = ImageDraw.Draw(self._image)

    def fill_block(self, x: int, y: int, size: int, color: Color) -> None:
        """Fill the square [x, x+size) x [y, y+size) with color."""
        # Pillow rectangle bounds are inclusive.
        self._draw.rectangle([x, y, x + size - 1, y + size - 1], fill=color)

    def serialize(self) -> bytes:
        """Encode the canvas as PNG.

        Returns:
            The PNG file contents.

        Raises:
            ImageEncodeError: If Pillow cannot write the image.
        """
        buf = io.BytesIO()
        try:
            self._image.save(buf, "PNG")
        except (OSError, ValueError) as e:
            raise ImageEncodeError(f"encoding PNG: {e}") from e
        return buf.getvalue()

    def read_canvas(self, source: bytes) -> Tuple[int, int, Callable[[int, int], Color]]:
        """Decode a PNG into RGB pixels.

        Alpha and palette modes are converted away, so the lookup always
        returns an (R, G, B) triple.

        Args:
            source: PNG file contents.

        Returns:
            A tuple of (width, height, lookup of the pixel at (x, y)).

        Raises:
            ImageDecodeError: If the data is not a readable PNG, or declares
                a canvas too large to decode.
        """
        try:
            with Image.open(io.BytesIO(source), formats=["PNG"]) as img:
                rgb = img.convert("RGB")
        except (OSError, ValueError, SyntaxError, EOFError, Image.DecompressionBombError) as e:
            raise ImageDecodeError(f"decoding PNG: {e}") from e

        pixels = rgb.load()
        width, height = rgb.size
        return width, height, lambda x, y: pixels[x, y][:3]


class VectorBackend(CanvasBackend):
    """SVG container written with svgwrite.

    Every block becomes one ``<rect>`` whose ``style`` is ``fill:#rrggbb``.
    Rects are written one per line in block order, and reading walks the
    document in order, so document order is block order.
    """

    name: str = "svg"

    _FILL_MARKER: str = "fill:#"
    _HEX_COLOR = re.compile(r"[0-9a-fA-F]{6}")

    def __init__(self) -> None:
        """Initialise the back-end with no drawing."""
        self._drawing: Optional[svgwrite.Drawing] = None

    def begin(self, width: int, height: int) -> None:
        """Start an SVG drawing with an explicit width and height."""
        self._drawing = svgwrite.Drawing(size=(width, height))

    def fill_block(self, x: int, y: int, size: int, color: Color) -> None:
        """Append a filled rect for one block."""
        r, g, b = color
        self._drawing.add(self._drawing.rect(
            insert=(x, y),
            size=(size, size),
            style=f"{self._FILL_MARKER}{r:02x}{g:02x}{b:02x}",
        ))

    def serialize(self) -> bytes:
        """Return the drawing as pretty-printed UTF-8 SVG."""
        buf = io.StringIO()
        self._drawing.write(buf, pretty=True)
        return buf.getvalue().encode("utf-8")

    def read_fills(self, source: bytes) -> List[Color]:
        """Collect the fill colour of every element in document order.

        Only elements whose style carries the ``fill:#`` marker count; the six
        characters after the marker are the colour.

        Args:
            source: SVG file contents.

        Returns:
            One (R, G, B) colour per filled element.

        Raises:
            ImageDecodeError: If the data is not well-formed XML or a fill
                colour is not six hex digits.
        """
        try:
            root = ElementTree.fromstring(source)
        except ElementTree.ParseError as e:
            raise ImageDecodeError(f"decoding SVG: {e}") from e

        colors: List[Color] = []
        for element in root.iter():
            style = element.get("style")
            if not style or self._FILL_MARKER not in style:
                continue
            digits = style.split(self._FILL_MARKER, 1)[1][:6]
            if not self._HEX_COLOR.fullmatch(digits):
                raise ImageDecodeError(f"decoding color in SVG: invalid fill '#{digits}'")
            rgb = ImageColor.getrgb("#" + digits)
            colors.append((rgb[0], rgb[1], rgb[2]))
        return colors


# ---------------------------------------------------------------------------
# BlockRenderer / BlockSampler
# ---------------------------------------------------------------------------
class BlockRenderer:
    """Draws block colours onto a back-end at their grid positions."""

    def render(self, colors: List[Color], geometry: Geometry, backend: CanvasBackend) -> bytes:
        """Paint one square per colour and serialise the canvas.

        Args:
            colors: Block colours in block order.
            geometry: Grid layout for the payload.
            backend: Container to draw into.

        Returns:
            The serialised container.
        """
        backend.begin(geometry.width, geometry.height)
        for index, color in enumerate(colors):
            x, y = geometry.block_origin(index)
            backend.fill_block(x, y, PIXEL_SIZE, color)
        return backend.serialize()


class BlockSampler:
    """Reads block colours back out of a rendered container."""

    def sample(self, source: bytes, backend: CanvasBackend, pixel_size: int = PIXEL_SIZE) -> List[Color]:
        """Extract one colour per block, in the order the renderer drew them.

        Pixel-grid containers are scanned at the top-left pixel of every
        pixel_size cell across the whole canvas, left to right and then top
        to bottom. Other containers supply their fill colours in order.

        Args:
            source: Container bytes produced by :class:`BlockRenderer`.
            backend: The back-end that understands the container.
            pixel_size: Block edge length in pixels.

        Returns:
            Block colours in row-major block order.
        """
        source = bytes(source)
        if not backend.grid_sampled:
            return backend.read_fills(source)

        width, height, pixel_at = backend.read_canvas(source)
        colors: List[Color] = []
        for y in range(0, height, pixel_size):
            for x in range(0, width, pixel_size):
                r, g, b = pixel_at(x, y)
                colors.append((r, g, b))
        return colors


# ---------------------------------------------------------------------------
# BlockCodec
# ---------------------------------------------------------------------------
class BlockCodec:
    """Runs the full encode and decode pipelines.

    Encode: hex text -> bytes -> geometry -> colours -> container.
    Decode: container -> colours -> bytes -> hex text.
    """

    def __init__(self) -> None:
        """Initialise the pipeline stages."""
        self._framing = HexFraming()
        self._planner = GeometryPlanner()
        self._packer = BlockPacker()
        self._unpacker = ByteUnpacker()
        self._renderer = BlockRenderer()
        self._sampler = BlockSampler()

    @staticmethod
    def backend_for(vector: bool) -> CanvasBackend:
        """Return a fresh SVG back-end if vector is set, else a PNG back-end."""
        return VectorBackend() if vector else RasterBackend()

    def encode(
        self,
        hex_text: Union[bytes, str],
        blocks_per_row: int,
        backend: CanvasBackend,
    ) -> Tuple[bytes, Geometry]:
        """Encode hex text as a block image.

        Args:
            hex_text: Input hex digits.
            blocks_per_row: Blocks per row, <= 0 for a single row.
            backend: Output container.

        Returns:
            A tuple of (container bytes, geometry used).

        Raises:
            FormatError: If the hex text is invalid.
            ImageEncodeError: If the container cannot be written.
        """
        data = self._framing.decode(hex_text)
        geometry = self._planner.plan(len(data), blocks_per_row)
        colors = self._packer.pack(data)
        return self._renderer.render(colors, geometry, backend), geometry

    def decode(self, image: bytes, backend: CanvasBackend) -> Tuple[str, int]:
        """Decode a block image back to hex text.

        Args:
            image: Container bytes.
            backend: Input container type.

        Returns:
            A tuple of (newline-terminated hex text, blocks sampled).

        Raises:
            ImageDecodeError: If the container cannot be read.
        """
        colors = self._sampler.sample(image, backend)
        data = self._unpacker.unpack(colors)
        return self._framing.encode(data), len(colors)


# ---------------------------------------------------------------------------
# SettingsManager
# ---------------------------------------------------------------------------
class SettingsManager:
    """JSON import/export of parameter sets with CLI-precedence logic.

    JSON values override argparse defaults; flags given explicitly on the
    command line override JSON values.
    """

    # Keys that are persisted to JSON, with the type each must hold.
    _PERSISTED_TYPES: Dict[str, type] = {"blocks_per_row": int, "vector": bool, "debug": bool}
    _PERSISTED_KEYS: List[str] = list(_PERSISTED_TYPES)

    def export_settings(self, params: argparse.Namespace, path: str) -> None:
        """Export current parameters to a JSON file.

        Args:
            params: The resolved argparse Namespace.
            path: Output JSON file path.

        Raises:
            OSError: If the file cannot be written.
        """
        data: Dict = {}
        for key in self._PERSISTED_KEYS:
            data[key] = getattr(params, key, None)
        with open(path, "w") as f:
            json.dump(data, f, indent=2)

    def import_settings(self, path: str) -> Dict:
        """Import settings from a JSON file.

        Args:
            path: Path to the JSON settings file.

        Returns:
            A dictionary of loaded settings.

        Raises:
            FileNotFoundError: If the file does not exist.
            json.JSONDecodeError: If the file is not valid JSON.
        """
        with open(path, "r") as f:
            return json.load(f)

    def merge_settings(
        self,
        defaults: argparse.Namespace,
        json_settings: Dict,
        explicit_keys: set,
    ) -> argparse.Namespace:
        """Merge JSON settings into parsed CLI args, respecting precedence.

        Args:
            defaults: The argparse Namespace with default/CLI values.
            json_settings: Dictionary loaded from JSON.
            explicit_keys: Parameter names explicitly provided on the CLI.

        Returns:
            The merged Namespace.

        Raises:
            ValueError: If the settings are not a JSON object or a value has
                the wrong type.
        """
        if not isinstance(json_settings, dict):
            raise ValueError("Settings file must contain a JSON object")
        for key, expected in self._PERSISTED_TYPES.items():
            if key not in json_settings:
                continue
            value = json_settings[key]
            # bool is an int subclass; true/false is not a row width.
            if not isinstance(value, expected) or (expected is int and isinstance(value, bool)):
                raise ValueError(f"Setting '{key}' must be {expected.__name__}, got {value!r}")
            if key not in explicit_keys:
                setattr(defaults, key, value)
        return defaults


# ---------------------------------------------------------------------------
# Version helper
# ---------------------------------------------------------------------------
def _changelog_version(fallback: str = "0.0.0") -> str:
    """Read the highest version from CHANGELOG.md next to this script.

    Scans for ``## [X.Y.Z]`` headings (skipping ``[Unreleased]``) and returns
    the first match. Returns *fallback* when the file is missing or has no
    versioned headings.
    """
    changelog = os.path.join(os.path.dirname(os.path.abspath(__file__)), "CHANGELOG.md")
    try:
        with open(changelog, "r", encoding="utf-8") as fh:
            for line in fh:
                m = re.match(r"^##\s+\[(\d+\.\d+\.\d+)\]", line)
                if m:
                    return m.group(1)
    except OSError:
        pass
    return fallback


def _json_path(path: str) -> str:
    """Append .json to a settings path that lacks it."""
    if not path.lower().endswith(".json"):
        path += ".json"
    return path


# ---------------------------------------------------------------------------
# Application
# ---------------------------------------------------------------------------
class Application:
    """Top-level entry point for the HEX Block Codec.

    Parses the command line, applies settings, reads stdin, runs the codec in
    the requested direction, and writes the result to stdout. Help, errors and
    debug output go to stderr.
    """

    VERSION:      str = _changelog_version("1.0.0")
    BUILD_DATE:   str = "2026-10-18"
    TITLE:        str = "HEX Block Codec"
    BANNER_WIDTH: int = 60

    def run(self, argv: Optional[List[str]] = None) -> int:
        """Execute one encode or decode invocation.

        Args:
            argv: Command-line arguments without the program name. Defaults
                to sys.argv[1:].

        Returns:
            The process exit code: 0 on success or help, 1 on failure.
        """
        if argv is None:
            argv = sys.argv[1:]

        # No arguments at all: show usage
        if not argv:
            self._build_parser().print_help()
            return 0

        # Step 1: Parse CLI arguments and detect explicit keys
        args, explicit_keys = self._parse_args(argv)

        # Step 2: Import settings if requested
        if args.import_settings:
            settings_path = _json_path(args.import_settings)
            try:
                manager = SettingsManager()
                json_data = manager.import_settings(settings_path)
                args = manager.merge_settings(args, json_data, explicit_keys)
            except FileNotFoundError:
                print(f"Error: Settings file not found: '{settings_path}'", file=sys.stderr)
                return 1
            except json.JSONDecodeError as e:
                print(f"Error: Malformed JSON in settings file: {e}", file=sys.stderr)
                return 1
            except ValueError as e:
                print(f"Error: Invalid settings file: {e}", file=sys.stderr)
                return 1

        # Step 3: Export settings if requested
        if args.export_settings:
            try:
                SettingsManager().export_settings(args, _json_path(args.export_settings))
            except OSError as e:
                print(f"Error: Cannot write settings file: {e}", file=sys.stderr)
                return 1

        # Step 4: Run the codec; nothing reaches stdout unless it succeeds
        codec = BlockCodec()
        backend = codec.backend_for(args.vector)
        geometry: Optional[Geometry] = None
        try:
            source = self._read_input()
            if args.decode:
                hex_text, block_count = codec.decode(source, backend)
                payload = hex_text.encode("ascii")
            else:
                payload, geometry = codec.encode(source, args.blocks_per_row, backend)
                block_count = geometry.block_count
        except CodecError as e:
            stage = "decoding" if args.decode else "encoding"
            print(f"Error {stage}: {e}", file=sys.stderr)
            return 1

        # Step 5: Write the result
        sys.stdout.buffer.write(payload)
        sys.stdout.buffer.flush()

        # Step 6: Debug output
        if args.debug:
            self._print_debug(
                args=args,
                backend=backend,
                input_size=len(source),
                block_count=block_count,
                geometry=geometry,
                output_size=len(payload),
            )
        return 0

    def _read_input(self) -> bytes:
        """Read all of standard input.

        Raises:
            InputReadError: If the stream cannot be read.
        """
        try:
            return sys.stdin.buffer.read()
        except OSError as e:
            raise InputReadError(f"reading input: {e}") from e

    def _parse_args(self, argv: List[str]) -> Tuple[argparse.Namespace, set]:
        """Parse CLI arguments and detect which were explicitly provided.

        Returns:
            A tuple of (parsed Namespace, set of explicitly-provided key names).
        """
        args = self._build_parser().parse_args(argv)

        # Second parse with SUPPRESS defaults to detect explicit keys
        explicit_args = self._build_parser(suppress_defaults=True).parse_args(argv)
        explicit_keys = set(vars(explicit_args).keys())

        return args, explicit_keys

    def _build_parser(self, suppress_defaults: bool = False) -> argparse.ArgumentParser:
        """Build the argparse ArgumentParser.

        Args:
            suppress_defaults: If True, set all defaults to SUPPRESS to
                detect explicitly-provided CLI args.

        Returns:
            A configured ArgumentParser.
        """
        S = argparse.SUPPRESS if suppress_defaults else None

        banner = self._banner_text()

        class _BannerParser(argparse.ArgumentParser):
            """ArgumentParser that prints the banner and help to stderr."""

            def print_help(self, file=None):
                if file is None:
                    file = sys.stderr
                file.write(banner + "\n\n")
                super().print_help(file)

        parser = _BannerParser(
            description="HEX Block Codec - encode hex text as a grid of colour blocks and back.",
            epilog=(
                "examples:\n"
                "  Encode: cat hexfile.txt | %(prog)s -b blocks_per_row [-v] > output.png/svg\n"
                "  Decode: cat input.png/svg | %(prog)s -d [-v] > output.txt"
            ),
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )
        d = S  # shorthand

        parser.add_argument("-d", "--decode", action="store_true", default=d if d else False,
                            help="Decode PNG/SVG to hex")
        parser.add_argument("-b", "--blocks_per_row", type=int, default=d if d else 0,
                            help="Number of blocks per row (0 for single row)")
        parser.add_argument("-v", "--vector", action="store_true", default=d if d else False,
                            help="Use SVG format instead of PNG")
        parser.add_argument("--debug", action="store_true", default=d if d else False,
                            help="Print geometry and sizes to stderr")
        parser.add_argument("--export_settings", type=str, default=None,
                            help="Export parameters to a JSON file")
        parser.add_argument("--import_settings", type=str, default=None,
                            help="Import parameters from a JSON file")
        parser.add_argument("--version", action="version",
                            version=f"{self.TITLE} {self.VERSION}")

        return parser

    def _banner_text(self) -> str:
        """Build the application banner as a string."""
        w = self.BANNER_WIDTH
        inner = w - 2  # space between │ and │
        lines = [
            "┌" + "─" * inner + "┐",
            f"│{'  Program:    ' + self.TITLE:<{inner}}│",
            f"│{'  Version:    ' + self.VERSION:<{inner}}│",
            f"│{'  Build Date: ' + self.BUILD_DATE:<{inner}}│",
            "└" + "─" * inner + "┘",
        ]
        return "\n".join(lines)

    def _print_debug(
        self,
        args: argparse.Namespace,
        backend: CanvasBackend,
        input_size: int,
        block_count: int,
        geometry: Optional[Geometry],
        output_size: int,
    ) -> None:
        """Print debug information to stderr.

        Args:
            args: The resolved parameters.
            backend: The container back-end used.
            input_size: Bytes read from stdin.
            block_count: Blocks drawn or sampled.
            geometry: Encode geometry, None when decoding.
            output_size: Bytes written to stdout.
        """
        err = sys.stderr
        print(self._banner_text(), file=err)
        print(f"\n  Direction:        {'decode' if args.decode else 'encode'}", file=err)
        print(f"  Format:           {backend.name}", file=err)
        print(f"  Input size:       {self._format_file_size(input_size)}", file=err)
        print(f"  Blocks:           {block_count}", file=err)
        if geometry is not None:
            bpr_str = f"{geometry.blocks_per_row}"
            if args.blocks_per_row <= 0:
                bpr_str += f" (single row from requested {args.blocks_per_row})"
            print(f"  Payload bytes:    {geometry.byte_length}", file=err)
            print(f"  Blocks per row:   {bpr_str}", file=err)
            print(f"  Rows:             {geometry.rows}", file=err)
            print(f"  Canvas:           {geometry.width} x {geometry.height}", file=err)
        print(f"  Output size:      {self._format_file_size(output_size)}", file=err)

    def _format_file_size(self, size_bytes: int) -> str:
        """Format a size in bytes in human-readable form (e.g. '1.23 MB')."""
        if size_bytes < 1024:
            return f"{size_bytes} B"
        elif size_bytes < 1024 * 1024:
            return f"{size_bytes / 1024:.2f} KB"
        else:
            return f"{size_bytes / (1024 * 1024):.2f} MB"


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------
def main() -> None:
    """Main entry point for the HEX Block Codec."""
    app = Application()
    sys.exit(app.run())


if __name__ == "__main__":
    main()
