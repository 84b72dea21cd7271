"""
L3 Compiler — ``__init__.py`` re-exports the compiler and assembler.
"""

from linite.core.services.command_gen.compiler.cleanup import CleanupAssembler  # noqa: F401
from linite.core.services.command_gen.compiler.command_compiler import (  # noqa: F401
    CompiledCommands,
    compile_commands,
    group_by_source,
)
