from .compiler import Compilation, CompilerOptions, ExpressionCompiler, compile_expression, split_assignment
from .emitter import TapeEmitter
from .errors import CompileError, ExpressionTooDeep, InvalidNumber, MalformedInput, NumberTooLarge
from .nodes import BinaryOperation, Expr, NumberLiteral
from .parser import Parser, parse_expression
from .tape import StepLimitExceeded, TapeMachine

__all__ = [
    "BinaryOperation",
    "Compilation",
    "CompileError",
    "CompilerOptions",
    "Expr",
    "ExpressionCompiler",
    "ExpressionTooDeep",
    "InvalidNumber",
    "MalformedInput",
    "NumberLiteral",
    "NumberTooLarge",
    "Parser",
    "StepLimitExceeded",
    "TapeEmitter",
    "TapeMachine",
    "compile_expression",
    "parse_expression",
    "split_assignment",
]
