from .diagnostics import ParseError
from .lexer import (END_OF_INPUT, Token, TokenStream, is_condition,
                    is_identifier, is_keyword, is_primitive)
from .statement import Condition


def _as_stream(tokens):
    if isinstance(tokens, TokenStream):
        return tokens
    if isinstance(tokens, str):
        return TokenStream.from_source(tokens)
    tokens = list(tokens)
    if tokens and all(isinstance(t, Token) for t in tokens):
        return TokenStream(tokens)
    return TokenStream.from_strings(tokens)


class Parser:
    """Recursive-descent parser for BL statements and programs.

    Tokens are consumed destructively from the front of a TokenStream; when
    a TokenStream is passed in, the caller sees it advance past whatever was
    parsed. Nesting depth is bounded only by the interpreter's recursion
    limit.
    """

    def __init__(self, tokens):
        self.tokens = _as_stream(tokens)

    def peek(self):
        return self.tokens.front()

    def consume(self, expected=None):
        tok = self.tokens.dequeue()
        if expected is not None and tok.value != expected:
            raise ParseError("E001", f"keyword {expected} not present", tok)
        return tok

    def consume_identifier(self):
        tok = self.tokens.dequeue()
        if not is_identifier(tok.value):
            raise ParseError("E002", "Invalid Identifier", tok)
        return tok

    def consume_condition(self):
        tok = self.tokens.dequeue()
        if not is_condition(tok.value):
            raise ParseError("E003", "Invalid Condition", tok)
        return Condition.from_token(tok.value)

    def at_end(self):
        return self.peek().value == END_OF_INPUT

    # Statements

    def parse_statement(self, s):
        assert len(self.tokens) > 0, "Violation of: END_OF_INPUT is a suffix of tokens"
        start = self.peek()
        if start.value == 'IF':
            self.parse_if(s)
        elif start.value == 'WHILE':
            self.parse_while(s)
        else:
            if not is_identifier(start.value):
                raise ParseError("E002", "Invalid Identifier", start)
            self.parse_call(s)

    def parse_block(self, s):
        """Parse statements into a BLOCK until END_OF_INPUT, ELSE or END."""
        s.clear()
        child = s.new_instance()
        pos = 0
        while self.peek().value not in (END_OF_INPUT, 'ELSE', 'END'):
            self.parse_statement(child)
            s.add_to_block(pos, child)
            pos += 1

    def parse_if(self, s):
        assert self.peek().value == 'IF', 'Violation of: <"IF"> is proper prefix of tokens'
        self.consume('IF')
        c = self.consume_condition()
        self.consume('THEN')
        then_branch = s.new_instance()
        self.parse_block(then_branch)
        if self.peek().value == 'ELSE':
            self.consume('ELSE')
            else_branch = s.new_instance()
            self.parse_block(else_branch)
            s.assemble_if_else(c, then_branch, else_branch)
        else:
            s.assemble_if(c, then_branch)
        self.consume('END')
        self.consume('IF')

    def parse_while(self, s):
        assert self.peek().value == 'WHILE', 'Violation of: <"WHILE"> is proper prefix of tokens'
        self.consume('WHILE')
        c = self.consume_condition()
        self.consume('DO')
        body = s.new_instance()
        self.parse_block(body)
        self.consume('END')
        self.consume('WHILE')
        s.assemble_while(c, body)

    def parse_call(self, s):
        call = self.consume_identifier()
        s.assemble_call(call.value)

    # Programs

    def parse_instruction(self, body):
        """Parse one INSTRUCTION definition into ``body``; return its name."""
        assert self.peek().value == 'INSTRUCTION', 'Violation of: <"INSTRUCTION"> is proper prefix of tokens'
        self.consume('INSTRUCTION')
        tok = self.tokens.dequeue()
        name = tok.value
        # Keywords and conditions already fail is_identifier; keep the
        # sharper messages for them.
        if is_keyword(name):
            raise ParseError("E004", "Instruction name cannot be a keyword", tok)
        if is_condition(name):
            raise ParseError("E005", "Instruction name cannot be a condition", tok)
        if not is_identifier(name):
            raise ParseError("E002", "Invalid Identifier", tok)
        if is_primitive(name):
            raise ParseError("E006", "Instruction name cannot be a primitive instruction", tok)
        self.consume('IS')
        self.parse_block(body)
        self.consume('END')
        closing = self.tokens.dequeue()
        if closing.value != name:
            raise ParseError("E007", "Identifier names do not match", closing)
        return name

    def parse_program(self, p):
        self.consume('PROGRAM')
        name = self.consume_identifier().value
        self.consume('IS')

        context = p.new_context()
        while self.peek().value != 'BEGIN':
            if self.peek().value != 'INSTRUCTION':
                raise ParseError("E001", "keyword BEGIN not present", self.peek())
            head = self.peek()
            body = p.new_body()
            instr = self.parse_instruction(body)
            if instr in context:
                raise ParseError("E008", "Cannot have duplicate Identifiers", head)
            context[instr] = body

        self.consume('BEGIN')
        body = p.new_body()
        self.parse_block(body)
        self.consume('END')
        closing = self.tokens.dequeue()
        if closing.value != name:
            raise ParseError("E007", "Identifier names do not match", closing)
        if not self.at_end():
            raise ParseError("E009", "There is content still in tokens", self.peek())

        p.name = name
        p.swap_context(context)
        p.swap_body(body)
