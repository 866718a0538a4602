import re
from collections import deque

END_OF_INPUT = "### END OF INPUT ###"

KEYWORDS = ('PROGRAM', 'IS', 'BEGIN', 'END', 'INSTRUCTION',
            'IF', 'THEN', 'ELSE', 'WHILE', 'DO')

CONDITIONS = ('next-is-empty', 'next-is-not-empty',
              'next-is-wall', 'next-is-not-wall',
              'next-is-friend', 'next-is-not-friend',
              'next-is-enemy', 'next-is-not-enemy',
              'random', 'true')

PRIMITIVES = ('move', 'turnleft', 'turnright', 'infect', 'skip')

_WORD = re.compile(r'[a-zA-Z][a-zA-Z0-9-]*\Z')


def is_keyword(s):
    return s in KEYWORDS


def is_condition(s):
    return s in CONDITIONS


def is_identifier(s):
    """A word that is neither a keyword nor a condition name."""
    return (isinstance(s, str) and _WORD.match(s) is not None
            and not is_keyword(s) and not is_condition(s))


def is_primitive(s):
    return s in PRIMITIVES


class Token:
    def __init__(self, type, value, line, column):
        self.type = type
        self.value = value
        self.line = line
        self.column = column
    def __repr__(self):
        return f"Token({self.type}, {repr(self.value)})"


def lex(code):
    token_specification = [
        ('COMMENT',   r'#[^\n]*'),
        ('WORD',      r'[a-zA-Z][a-zA-Z0-9-]*'),
        ('NEWLINE',   r'\n'),
        ('SKIP',      r'[ \t\r\f\v]+'),
        # Anything else up to the next blank; the parser rejects it in context
        ('ERROR',     r'[^\sa-zA-Z#][^\s#]*'),
    ]
    tok_regex = '|'.join('(?P<%s>%s)' % pair for pair in token_specification)
    line_num = 1
    line_start = 0
    tokens = []
    for mo in re.finditer(tok_regex, code):
        kind = mo.lastgroup
        value = mo.group()
        column = mo.start() - line_start
        if kind == 'NEWLINE':
            line_start = mo.end()
            line_num += 1
            continue
        elif kind == 'SKIP' or kind == 'COMMENT':
            continue
        if kind == 'WORD':
            if is_keyword(value):
                kind = 'KEYWORD'
            elif is_condition(value):
                kind = 'CONDITION'
            else:
                kind = 'IDENTIFIER'
        tokens.append(Token(kind, value, line_num, column))
    tokens.append(Token('EOF', END_OF_INPUT, line_num, 0))
    return tokens


class TokenStream:
    """Front-consumable queue of tokens ending with the END_OF_INPUT token.

    The end-of-input token is never removed: dequeuing it hands it back and
    leaves it in place, so a truncated program fails on the keyword it is
    missing rather than on an empty queue.
    """

    def __init__(self, tokens):
        self._tokens = deque(tokens)
        if not self._tokens or self._tokens[-1].value != END_OF_INPUT:
            line = self._tokens[-1].line if self._tokens else 1
            self._tokens.append(Token('EOF', END_OF_INPUT, line, 0))

    @classmethod
    def from_source(cls, code):
        return cls(lex(code))

    @classmethod
    def from_strings(cls, values):
        """Build a stream from bare token strings (no source positions)."""
        tokens = []
        for i, value in enumerate(values):
            if value == END_OF_INPUT:
                kind = 'EOF'
            elif is_keyword(value):
                kind = 'KEYWORD'
            elif is_condition(value):
                kind = 'CONDITION'
            elif is_identifier(value):
                kind = 'IDENTIFIER'
            else:
                kind = 'ERROR'
            tokens.append(Token(kind, value, 1, i))
        return cls(tokens)

    def front(self):
        return self._tokens[0]

    def dequeue(self):
        if len(self._tokens) == 1:
            return self._tokens[0]
        return self._tokens.popleft()

    def length(self):
        return len(self._tokens)

    def __len__(self):
        return len(self._tokens)

    def __iter__(self):
        return iter(self._tokens)

    def __repr__(self):
        return f"TokenStream({[t.value for t in self._tokens]!r})"
