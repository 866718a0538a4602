from types import MappingProxyType

from .lexer import is_identifier
from .statement import Kind, Statement


class Program:
    """A parsed BL program: a name, its user-defined instructions and a body.

    ``context`` maps instruction names to their BLOCK bodies. The context
    and body are exchanged wholesale with ``swap_context``/``swap_body``;
    they are never merged.
    """

    DEFAULT_NAME = "Unnamed"

    def __init__(self):
        self._create_new_rep()

    def _create_new_rep(self):
        self._name = self.DEFAULT_NAME
        self._context = self.new_context()
        self._body = self.new_body()

    def new_instance(self):
        return type(self)()

    def new_context(self):
        return {}

    def new_body(self):
        return Statement()

    def clear(self):
        self._create_new_rep()

    def transfer_from(self, source):
        assert isinstance(source, Program), "Violation of: source is a Program"
        assert source is not self, "Violation of: source is not this"
        self._name, self._context, self._body = source._name, source._context, source._body
        source._create_new_rep()

    @property
    def name(self):
        return self._name

    @name.setter
    def name(self, n):
        assert is_identifier(n), "Violation of: n is a valid IDENTIFIER"
        self._name = n

    def swap_context(self, c):
        """Exchange the instruction map with ``c`` in place."""
        assert isinstance(c, dict), "Violation of: c is a dict"
        for name, body in c.items():
            assert is_identifier(name), f"Violation of: {name!r} is a valid IDENTIFIER"
            assert body.kind == Kind.BLOCK, f"Violation of: body of {name} is a BLOCK statement"
        mine = dict(self._context)
        self._context.clear()
        self._context.update(c)
        c.clear()
        c.update(mine)

    def swap_body(self, b):
        """Exchange the main body with ``b``; ``b`` receives the old body."""
        assert isinstance(b, Statement), "Violation of: b is a Statement"
        assert b.kind == Kind.BLOCK, "Violation of: b is a BLOCK statement"
        old = self._body.new_instance()
        old.transfer_from(self._body)
        self._body.transfer_from(b)
        b.transfer_from(old)

    # Read-only views for consumers such as the pretty-printer

    @property
    def context(self):
        return MappingProxyType(self._context)

    @property
    def body(self):
        return self._body

    def __eq__(self, other):
        if not isinstance(other, Program):
            return NotImplemented
        return (self._name == other._name and self._context == other._context
                and self._body == other._body)

    __hash__ = None

    def __repr__(self):
        return f"Program({self._name!r}, instructions={sorted(self._context)})"

    def parse(self, tokens):
        """Replace this with the program in ``tokens`` (a TokenStream or token list)."""
        from .parser import Parser
        Parser(tokens).parse_program(self)

    def parse_source(self, code):
        from .lexer import TokenStream
        self.parse(TokenStream.from_source(code))
