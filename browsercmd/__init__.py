"""browsercmd: the command compiler for a remote-controlled browser.

A CLI invocation like `browsercmd find role button --name Submit` is turned
into exactly one structured command message for a browser automation
backend. The backend, the transport to it, and session management live
elsewhere; this package only owns the grammar and the message shapes.

Core pieces:
- Options: global switches (`--json`, `--full`, `--headed`, `--debug`,
  `--session NAME`) pulled out of the raw tokens
- Compiler: dispatch over ~30 command families, with sub-grammars for
  semantic locators (`find`) and browser settings (`set`)
- Commands: immutable, typed message variants with a JSON wire form
"""
__version__ = "0.1.0"

from browsercmd.compiler import compile_command
from browsercmd.options import parse_options, strip_options

__all__ = ["__version__", "compile_command", "parse_options", "strip_options"]
