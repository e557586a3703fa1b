import sys
import argparse
import json
import string
import importlib.util
from abc import ABC, abstractmethod
from typing import List, Optional
from pathlib import Path

ENCRYPT = "encrypt"
DECRYPT = "decrypt"
DEFAULT_SHIFT = 3

# Verbose mode (disabled by default, enabled with --verbose)
VERBOSE = False

def log_info(msg: str):
    """Print info message only if verbose mode is enabled."""
    if VERBOSE:
        print(f"[INFO] {msg}", file=sys.stderr)

def log_warn(msg: str):
    """Print warning message only if verbose mode is enabled."""
    if VERBOSE:
        print(f"[WARN] {msg}", file=sys.stderr)


class InvalidArgument(ValueError):
    """Raised when a cipher is built or driven with unusable parameters."""

# ==========================================
#  FRAMEWORK: Abstract Base Class & Registry
# ==========================================

class CipherStrategy(ABC):
    """Abstract base class that all ciphers must implement."""

    @property
    @abstractmethod
    def name(self) -> str:
        """The command-line name for this cipher."""
        pass

    @property
    @abstractmethod
    def description(self) -> str:
        """Short description for help text."""
        pass

    @abstractmethod
    def encrypt(self, text: str) -> str:
        pass

    @abstractmethod
    def decrypt(self, text: str) -> str:
        pass

    @classmethod
    def from_options(cls, shift: Optional[int] = None, key: Optional[str] = None) -> "CipherStrategy":
        """Build an instance from CLI-style options. Parameterless ciphers ignore them."""
        return cls()

CIPHER_REGISTRY = {}

def register_cipher(cls):
    """Decorator to auto-register cipher classes."""
    existing = CIPHER_REGISTRY.get(cls.name)
    if existing is not None and existing is not cls:
        log_warn(f"Cipher '{cls.name}' ({existing.__name__}) replaced by {cls.__name__}")
    CIPHER_REGISTRY[cls.name] = cls
    return cls

def create_cipher(name: str, shift: Optional[int] = None, key: Optional[str] = None) -> CipherStrategy:
    """Factory for registered ciphers."""
    try:
        cls = CIPHER_REGISTRY[name]
    except KeyError:
        raise InvalidArgument(f"Unknown cipher '{name}'. Available: {', '.join(CIPHER_REGISTRY)}") from None
    return cls.from_options(shift=shift, key=key)


def _shift_letter(char: str, shift: int) -> str:
    if 'a' <= char <= 'z':
        base = ord('a')
    elif 'A' <= char <= 'Z':
        base = ord('A')
    else:
        return char
    return chr((ord(char) - base + shift) % 26 + base)

# ==========================================
#  METHOD 1: Caesar
# ==========================================

@register_cipher
class CaesarCipher(CipherStrategy):
    name = "caesar"
    description = "Shifts every letter by a fixed amount (--shift, default 3)."

    def __init__(self, shift: int):
        # bool is an int subclass but never a meaningful shift
        if isinstance(shift, bool) or not isinstance(shift, int):
            raise InvalidArgument(f"Caesar shift must be an integer, got {shift!r}")
        self.shift = shift

    @classmethod
    def from_options(cls, shift=None, key=None):
        return cls(DEFAULT_SHIFT if shift is None else shift)

    def encrypt(self, text: str) -> str:
        return "".join(_shift_letter(c, self.shift) for c in text)

    def decrypt(self, text: str) -> str:
        return "".join(_shift_letter(c, -self.shift) for c in text)

    def __repr__(self):
        return f"CaesarCipher(shift={self.shift})"

# ==========================================
#  METHOD 2: Vigenere
# ==========================================

@register_cipher
class VigenereCipher(CipherStrategy):
    name = "vigenere"
    description = "Polyalphabetic shift driven by a repeating key (--key required)."

    def __init__(self, key: str):
        if not key:
            raise InvalidArgument("Vigenere key must not be empty")
        self.key = key
        # Only letters of the key take part in the keystream
        self._shifts = [ord(c.lower()) - ord('a') for c in key if c in string.ascii_letters]
        if not self._shifts:
            raise InvalidArgument(f"Vigenere key must contain at least one letter, got {key!r}")

    @classmethod
    def from_options(cls, shift=None, key=None):
        if key is None:
            raise InvalidArgument("The vigenere cipher needs a key (--key)")
        return cls(key)

    def _apply(self, text: str, sign: int) -> str:
        result = []
        j = 0
        for char in text:
            if char in string.ascii_letters:
                result.append(_shift_letter(char, sign * self._shifts[j % len(self._shifts)]))
                j += 1
            else:
                result.append(char)
        return "".join(result)

    def encrypt(self, text: str) -> str:
        return self._apply(text, 1)

    def decrypt(self, text: str) -> str:
        return self._apply(text, -1)

    def __repr__(self):
        return f"VigenereCipher(key={self.key!r})"

# ==========================================
#  CONTEXT: Swappable strategy holder
# ==========================================

def _strategy_label(strategy) -> str:
    # Any object with encrypt/decrypt is accepted, registered or not
    return getattr(strategy, "name", type(strategy).__name__)


class TextCipher:
    """
    Holds one active cipher and delegates to it.

    The active strategy is plain mutable state: a TextCipher must not be shared
    between concurrent callers. Use transform() when the strategy should travel
    with each call instead.
    """

    def __init__(self, strategy: CipherStrategy):
        self._strategy = strategy

    @property
    def strategy(self) -> CipherStrategy:
        return self._strategy

    def set_strategy(self, strategy: CipherStrategy) -> None:
        log_info(f"Switching strategy {_strategy_label(self._strategy)} -> {_strategy_label(strategy)}")
        self._strategy = strategy

    def encrypt(self, text: str) -> str:
        return self._strategy.encrypt(text)

    def decrypt(self, text: str) -> str:
        return self._strategy.decrypt(text)


def transform(text: str, strategy: CipherStrategy, direction: str) -> str:
    """Encrypt or decrypt text with the given strategy, without any shared state."""
    if direction == ENCRYPT:
        return strategy.encrypt(text)
    if direction == DECRYPT:
        return strategy.decrypt(text)
    raise InvalidArgument(f"Direction must be '{ENCRYPT}' or '{DECRYPT}', got {direction!r}")

# ==========================================
#  PLUGIN SYSTEM: Dynamic Cipher Loading
# ==========================================

def load_plugins(plugin_dir: str = None) -> List[str]:
    """
    Load cipher plugins from a directory with manifest.json.

    Args:
        plugin_dir: Path to plugins directory (default: ./plugins relative to this module)

    Returns:
        List of successfully loaded plugin names
    """
    if plugin_dir is None:
        plugin_dir = Path(__file__).parent / "plugins"
    else:
        plugin_dir = Path(plugin_dir)

    if not plugin_dir.exists():
        return []

    manifest_path = plugin_dir / "manifest.json"
    if not manifest_path.exists():
        log_warn(f"No manifest.json in {plugin_dir}. Skipping plugin loading.")
        return []

    try:
        with open(manifest_path, "r", encoding="utf-8") as f:
            manifest = json.load(f)
    except (json.JSONDecodeError, OSError) as e:
        log_warn(f"Failed to read manifest.json: {e}")
        return []

    plugins_list = manifest.get("plugins", []) if isinstance(manifest, dict) else None
    if not isinstance(plugins_list, list):
        log_warn(f"Malformed manifest.json in {plugin_dir}: expected {{\"plugins\": [...]}}. Skipping plugin loading.")
        return []

    loaded = []
    for entry in plugins_list:
        if not isinstance(entry, dict):
            log_warn(f"Skipping malformed manifest entry: {entry!r}")
            continue
        filename = entry.get("file")
        expected_cipher = entry.get("cipher")

        if not filename:
            continue

        filepath = plugin_dir / filename
        if not filepath.exists():
            log_warn(f"Plugin file not found: {filepath}")
            continue

        try:
            spec = importlib.util.spec_from_file_location(Path(filename).stem, filepath)
            if spec and spec.loader:
                module = importlib.util.module_from_spec(spec)
                # Make our framework available to plugins
                module.CipherStrategy = CipherStrategy
                module.CaesarCipher = CaesarCipher
                module.register_cipher = register_cipher
                module.log_warn = log_warn
                spec.loader.exec_module(module)

                if expected_cipher and expected_cipher in CIPHER_REGISTRY:
                    loaded.append(expected_cipher)
                elif expected_cipher:
                    log_warn(f"Plugin {filename} did not register cipher '{expected_cipher}'")
                else:
                    loaded.append(filename)
        except Exception as e:
            log_warn(f"Failed to load plugin {filename}: {e}")

    return loaded

# ==========================================
#  CLI LOGIC
# ==========================================

def list_ciphers():
    """Print all available ciphers."""
    print("\nAvailable Ciphers:")
    print("=" * 60)
    for name, cls in CIPHER_REGISTRY.items():
        print(f"  {name:<12} {cls.description}")
    print("=" * 60)
    print(f"\nTotal: {len(CIPHER_REGISTRY)} cipher(s) registered.")


def _scan_plugin_dir(argv: List[str]) -> Optional[str]:
    for i, arg in enumerate(argv):
        if arg == "--plugin-dir" and i + 1 < len(argv):
            return argv[i + 1]
        if arg.startswith("--plugin-dir="):
            return arg.split("=", 1)[1]
    return None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cipher-engine",
        description="Substitution cipher engine (Caesar, Vigenere + plugins)",
        formatter_class=argparse.RawTextHelpFormatter
    )

    parser.add_argument("--version", action="version", version="%(prog)s 1.0")

    method_help = "\n".join(f"  {k:<12}: {v.description}" for k, v in CIPHER_REGISTRY.items())

    # Method selection (choices are dynamic based on loaded plugins)
    parser.add_argument("-m", "--method", choices=list(CIPHER_REGISTRY.keys()), default="caesar",
                        help=f"Select cipher algorithm (default: caesar).\n{method_help}")

    action_group = parser.add_mutually_exclusive_group(required=True)
    action_group.add_argument("-e", "--encrypt", action="store_true", help="Encrypt mode")
    action_group.add_argument("-d", "--decrypt", action="store_true", help="Decrypt mode")
    action_group.add_argument("-l", "--list", action="store_true", help="List all available ciphers")

    # Cipher parameters
    parser.add_argument("-s", "--shift", type=int, metavar="N",
                        help=f"Caesar shift (default: {DEFAULT_SHIFT}). Any integer; applied modulo 26.")
    parser.add_argument("-k", "--key", metavar="KEY",
                        help="Vigenere key. Only its letters are used.")

    parser.add_argument("--plugin-dir", type=str, metavar="PATH",
                        help="Custom plugin directory (must contain manifest.json)")

    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Enable verbose output (info and warning messages)")

    io_group = parser.add_mutually_exclusive_group()
    io_group.add_argument("-t", "--text", help="Direct text input")
    io_group.add_argument("-i", "--input", help="Input file path")

    parser.add_argument("-o", "--output", help="Output file path")
    return parser


def main(argv: Optional[List[str]] = None):
    global VERBOSE

    if argv is None:
        argv = sys.argv[1:]

    # Preliminary scan for --verbose (needed before plugin loading)
    VERBOSE = "--verbose" in argv or "-v" in argv

    # Load plugins before parsing args (so they appear in --list and -m choices)
    loaded_plugins = load_plugins(_scan_plugin_dir(argv))
    if loaded_plugins:
        log_info(f"Loaded plugins: {', '.join(loaded_plugins)}")

    args = build_parser().parse_args(argv)

    if args.list:
        list_ciphers()
        return 0

    # 1. BUILD CIPHER
    try:
        cipher = create_cipher(args.method, shift=args.shift, key=args.key)
    except InvalidArgument as e:
        sys.exit(f"Error: {e}")
    log_info(f"Using {cipher!r}")

    # 2. READ INPUT
    if args.text is not None:
        source_text = args.text
    elif args.input:
        try:
            with open(args.input, "r", encoding="utf-8") as f:
                source_text = f.read()
        except FileNotFoundError:
            sys.exit(f"Error: File '{args.input}' not found.")
        except (OSError, UnicodeDecodeError) as e:
            sys.exit(f"Error reading '{args.input}': {e}")
    elif not sys.stdin.isatty():
        source_text = sys.stdin.read()
    else:
        print("[CIPHER] Paste input below. Ctrl+D (Unix) or Ctrl+Z (Win) to end:")
        try:
            source_text = sys.stdin.read()
        except KeyboardInterrupt:
            return 0

    # 3. TRANSFORM
    result = transform(source_text, cipher, ENCRYPT if args.encrypt else DECRYPT)

    # 4. WRITE OUTPUT
    if args.output:
        try:
            with open(args.output, "w", encoding="utf-8") as f:
                f.write(result)
        except OSError as e:
            sys.exit(f"Error writing output: {e}")
    else:
        print(result)
    return 0

if __name__ == "__main__":
    sys.exit(main())
