from .diagnostics import ParseError
from .lexer import TokenStream, lex
from .parser import Parser
from .program import Program
from .statement import Statement


def parse_source(code):
    """Parse BL program text into a Program."""
    p = Program()
    Parser(TokenStream(lex(code))).parse_program(p)
    return p


def parse_file(filepath):
    with open(filepath) as f:
        code = f.read()
    return parse_source(code)


def parse_statements(code):
    """Parse a bare sequence of BL statements into a BLOCK Statement.

    Unlike Statement.parse_block, the whole input must be consumed: a stray
    ELSE or END ends the block early and is reported here.
    """
    parser = Parser(TokenStream(lex(code)))
    s = Statement()
    parser.parse_block(s)
    if not parser.at_end():
        raise ParseError("E009", "There is content still in tokens", parser.peek())
    return s
