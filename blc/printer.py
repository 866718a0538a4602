from .statement import Kind

INDENT_SIZE = 2


class PrettyPrinter:
    """Renders statements and programs back to canonical BL source.

    Statements are walked with their own disassembly operations and put back
    together afterwards, so printing leaves its input unchanged.
    """

    def __init__(self, indent=INDENT_SIZE):
        self.indent = indent
        self.lines = []

    def emit(self, offset, text):
        self.lines.append(' ' * offset + text)

    def text(self):
        return '\n'.join(self.lines) + '\n'

    def gen_statement(self, s, offset=0):
        kind = s.kind
        if kind == Kind.BLOCK:
            for i in range(s.length_of_block()):
                child = s.remove_from_block(i)
                self.gen_statement(child, offset)
                s.add_to_block(i, child)
        elif kind == Kind.IF:
            body = s.new_instance()
            c = s.disassemble_if(body)
            self.emit(offset, f"IF {c.token} THEN")
            self.gen_statement(body, offset + self.indent)
            self.emit(offset, "END IF")
            s.assemble_if(c, body)
        elif kind == Kind.IF_ELSE:
            then_branch, else_branch = s.new_instance(), s.new_instance()
            c = s.disassemble_if_else(then_branch, else_branch)
            self.emit(offset, f"IF {c.token} THEN")
            self.gen_statement(then_branch, offset + self.indent)
            self.emit(offset, "ELSE")
            self.gen_statement(else_branch, offset + self.indent)
            self.emit(offset, "END IF")
            s.assemble_if_else(c, then_branch, else_branch)
        elif kind == Kind.WHILE:
            body = s.new_instance()
            c = s.disassemble_while(body)
            self.emit(offset, f"WHILE {c.token} DO")
            self.gen_statement(body, offset + self.indent)
            self.emit(offset, "END WHILE")
            s.assemble_while(c, body)
        elif kind == Kind.CALL:
            inst = s.disassemble_call()
            self.emit(offset, inst)
            s.assemble_call(inst)

    def gen_program(self, p):
        self.emit(0, f"PROGRAM {p.name} IS")
        self.emit(0, "")
        for name in p.context:
            self.emit(self.indent, f"INSTRUCTION {name} IS")
            self.gen_statement(p.context[name], 2 * self.indent)
            self.emit(self.indent, f"END {name}")
            self.emit(0, "")
        self.emit(0, "BEGIN")
        self.gen_statement(p.body, self.indent)
        self.emit(0, f"END {p.name}")


def pretty_statement(s, offset=0):
    pp = PrettyPrinter()
    pp.gen_statement(s, offset)
    return pp.text() if pp.lines else ''


def pretty_program(p):
    pp = PrettyPrinter()
    pp.gen_program(p)
    return pp.text()


def tree(s):
    """S-expression dump of a statement, e.g. (BLOCK (CALL move))."""
    kind = s.kind
    if kind == Kind.BLOCK:
        parts = []
        for i in range(s.length_of_block()):
            child = s.remove_from_block(i)
            parts.append(tree(child))
            s.add_to_block(i, child)
        return '(BLOCK' + ''.join(' ' + p for p in parts) + ')'
    if kind == Kind.IF:
        body = s.new_instance()
        c = s.disassemble_if(body)
        out = f"(IF {c.token} {tree(body)})"
        s.assemble_if(c, body)
        return out
    if kind == Kind.IF_ELSE:
        then_branch, else_branch = s.new_instance(), s.new_instance()
        c = s.disassemble_if_else(then_branch, else_branch)
        out = f"(IF_ELSE {c.token} {tree(then_branch)} {tree(else_branch)})"
        s.assemble_if_else(c, then_branch, else_branch)
        return out
    if kind == Kind.WHILE:
        body = s.new_instance()
        c = s.disassemble_while(body)
        out = f"(WHILE {c.token} {tree(body)})"
        s.assemble_while(c, body)
        return out
    inst = s.disassemble_call()
    s.assemble_call(inst)
    return f"(CALL {inst})"
