from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .lexer import is_identifier


class Kind(Enum):
    BLOCK = 'BLOCK'
    IF = 'IF'
    IF_ELSE = 'IF_ELSE'
    WHILE = 'WHILE'
    CALL = 'CALL'


class Condition(Enum):
    NEXT_IS_EMPTY = 'next-is-empty'
    NEXT_IS_NOT_EMPTY = 'next-is-not-empty'
    NEXT_IS_WALL = 'next-is-wall'
    NEXT_IS_NOT_WALL = 'next-is-not-wall'
    NEXT_IS_FRIEND = 'next-is-friend'
    NEXT_IS_NOT_FRIEND = 'next-is-not-friend'
    NEXT_IS_ENEMY = 'next-is-enemy'
    NEXT_IS_NOT_ENEMY = 'next-is-not-enemy'
    RANDOM = 'random'
    TRUE = 'true'

    @classmethod
    def from_token(cls, c):
        """Translate a condition token (already known to be valid)."""
        return cls[c.replace('-', '_').upper()]

    @property
    def token(self):
        return self.value


_CONDITIONAL = (Kind.IF, Kind.IF_ELSE, Kind.WHILE)


@dataclass(frozen=True)
class _Label:
    kind: Kind
    condition: Optional[Condition] = None
    instruction: Optional[str] = None

    def __str__(self):
        condition = self.condition.name if self.condition else '?'
        instruction = self.instruction if self.instruction else '?'
        return f"({self.kind.name},{condition},{instruction})"


def _block_label():
    return _Label(Kind.BLOCK)


def _conditional_label(kind, c):
    assert kind in _CONDITIONAL, "Violation of: kind is IF, IF_ELSE or WHILE"
    assert isinstance(c, Condition), "Violation of: c is a Condition"
    return _Label(kind, condition=c)


def _call_label(inst):
    assert is_identifier(inst), "Violation of: inst is a valid IDENTIFIER"
    return _Label(Kind.CALL, instruction=inst)


class Statement:
    """A BL statement: a labelled tree whose root label fixes its shape.

    BLOCK has any number of non-BLOCK children, IF and WHILE exactly one
    BLOCK child, IF_ELSE two BLOCK children, CALL none. Every operation that
    takes another Statement moves that node's tree into this one and leaves
    the argument as an empty BLOCK, so no tree is ever shared.
    """

    def __init__(self):
        self._create_new_rep()

    def _create_new_rep(self):
        self._label = _block_label()
        self._children = []

    def _take(self, other):
        assert isinstance(other, Statement), "Violation of: s is a Statement"
        assert other is not self, "Violation of: s is not this"
        label, children = other._label, other._children
        other._create_new_rep()
        return label, children

    def _give(self, other, rep):
        other._label, other._children = rep

    # Standard methods

    def new_instance(self):
        return type(self)()

    def clear(self):
        self._create_new_rep()

    def transfer_from(self, source):
        self._label, self._children = self._take(source)

    def __eq__(self, other):
        if not isinstance(other, Statement):
            return NotImplemented
        return self._label == other._label and self._children == other._children

    __hash__ = None

    def __str__(self):
        return str(self._label)

    def __repr__(self):
        from .printer import tree
        return f"Statement({tree(self)})"

    # Kernel methods

    @property
    def kind(self):
        return self._label.kind

    def add_to_block(self, pos, s):
        assert self.kind == Kind.BLOCK, "Violation of: [this is a BLOCK statement]"
        assert 0 <= pos <= len(self._children), "Violation of: 0 <= pos <= [length of this BLOCK]"
        assert s.kind != Kind.BLOCK, "Violation of: [s is not a BLOCK statement]"
        child = s.new_instance()
        child._label, child._children = self._take(s)
        self._children.insert(pos, child)

    def remove_from_block(self, pos):
        assert self.kind == Kind.BLOCK, "Violation of: [this is a BLOCK statement]"
        assert 0 <= pos < len(self._children), "Violation of: 0 <= pos < [length of this BLOCK]"
        return self._children.pop(pos)

    def length_of_block(self):
        assert self.kind == Kind.BLOCK, "Violation of: [this is a BLOCK statement]"
        return len(self._children)

    def assemble_if(self, c, s):
        assert s.kind == Kind.BLOCK, "Violation of: [s is a BLOCK statement]"
        label = _conditional_label(Kind.IF, c)
        child = s.new_instance()
        child._label, child._children = self._take(s)
        self._label, self._children = label, [child]

    def disassemble_if(self, s):
        assert self.kind == Kind.IF, "Violation of: [this is an IF statement]"
        assert s is not self, "Violation of: s is not this"
        c = self._label.condition
        self._give(s, self._take(self._children[0]))
        self._create_new_rep()
        return c

    def assemble_if_else(self, c, s1, s2):
        assert s1 is not s2, "Violation of: s1 is not s2"
        assert s1.kind == Kind.BLOCK, "Violation of: [s1 is a BLOCK statement]"
        assert s2.kind == Kind.BLOCK, "Violation of: [s2 is a BLOCK statement]"
        label = _conditional_label(Kind.IF_ELSE, c)
        then_branch, else_branch = s1.new_instance(), s2.new_instance()
        then_branch._label, then_branch._children = self._take(s1)
        else_branch._label, else_branch._children = self._take(s2)
        self._label, self._children = label, [then_branch, else_branch]

    def disassemble_if_else(self, s1, s2):
        assert self.kind == Kind.IF_ELSE, "Violation of: [this is an IF_ELSE statement]"
        assert s1 is not self and s2 is not self, "Violation of: s1, s2 are not this"
        assert s1 is not s2, "Violation of: s1 is not s2"
        c = self._label.condition
        then_branch, else_branch = self._children
        self._give(s1, self._take(then_branch))
        self._give(s2, self._take(else_branch))
        self._create_new_rep()
        return c

    def assemble_while(self, c, s):
        assert s.kind == Kind.BLOCK, "Violation of: [s is a BLOCK statement]"
        label = _conditional_label(Kind.WHILE, c)
        child = s.new_instance()
        child._label, child._children = self._take(s)
        self._label, self._children = label, [child]

    def disassemble_while(self, s):
        assert self.kind == Kind.WHILE, "Violation of: [this is a WHILE statement]"
        assert s is not self, "Violation of: s is not this"
        c = self._label.condition
        self._give(s, self._take(self._children[0]))
        self._create_new_rep()
        return c

    def assemble_call(self, inst):
        self._label, self._children = _call_label(inst), []

    def disassemble_call(self):
        assert self.kind == Kind.CALL, "Violation of: [this is a CALL statement]"
        inst = self._label.instruction
        self._create_new_rep()
        return inst

    # Parsing

    def parse(self, tokens):
        """Replace this with the one statement at the front of ``tokens``."""
        from .parser import Parser
        Parser(tokens).parse_statement(self)

    def parse_block(self, tokens):
        """Replace this with the BLOCK of statements at the front of ``tokens``."""
        from .parser import Parser
        Parser(tokens).parse_block(self)
