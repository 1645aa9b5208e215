"""Parser for propositional terms and sequents.

Terms are parsed with an operator stack and deferred reductions rather than
by recursive descent. The stack holds terms and pending operator glyphs;
``¬`` and ``∧`` are reduced as soon as their right operand is complete, and
``∨`` is only reduced when the enclosing parenthesis or the whole term ends.
Between reductions the stack is therefore an alternation of fully reduced
operands and pending ``∨``s, optionally preceded by open parentheses.
"""

from typing import List, Optional, Union

from seqprover.core.logic import (
    Term, Variable, Not, And, Or, Sequent,
    TURNSTILE, EMPTY, NOT, AND, OR
)
from seqprover.core.exceptions import SequentSyntaxError, InternalError
from .tokenizer import Tokenizer, IDENTIFIER


_StackItem = Union[Term, str]


class _TermStack:
    """Operand/operator stack for a single term."""

    def __init__(self, tokenizer: Tokenizer):
        self.tokenizer = tokenizer
        self.items: List[_StackItem] = []

    def __len__(self):
        return len(self.items)

    def top_is_term(self, depth: int = 1) -> bool:
        return len(self.items) >= depth and isinstance(self.items[-depth], Term)

    def push(self, item: _StackItem):
        self.items.append(item)

    def error(self, message: str) -> SequentSyntaxError:
        return SequentSyntaxError(message, self.tokenizer.pos)

    def check_before_unary(self):
        """An operand may not directly follow another operand."""
        if self.top_is_term():
            raise self.error("Unexpected item")

    def check_before_binary(self):
        """A binary operator needs a left operand."""
        if not self.top_is_term():
            raise self.error("Unexpected item")

    def reduce(self):
        """Apply every pending ``¬`` and ``∧`` whose operands are complete."""
        items = self.items
        while True:
            if len(items) >= 2 and items[-2] == NOT and self.top_is_term():
                child = items.pop()
                items.pop()
                items.append(Not(child))
            elif (len(items) >= 3 and self.top_is_term() and items[-2] == AND
                    and self.top_is_term(3)):
                right = items.pop()
                items.pop()
                left = items.pop()
                items.append(And(left, right))
            else:
                break

    def final_reduce(self):
        """Collapse the pending ``∨``s at the top of the stack."""
        items = self.items
        while (len(items) >= 3 and self.top_is_term() and items[-2] == OR
                and self.top_is_term(3)):
            right = items.pop()
            items.pop()
            left = items.pop()
            items.append(Or(left, right))


def _is_term_end(token: Optional[str]) -> bool:
    return token is None or token == TURNSTILE or token == ","


def parse_term(tokenizer: Tokenizer) -> Optional[Term]:
    """Parse one term, stopping before a comma, turnstile or end of input.

    Returns None if the term is the empty-set marker, which is consumed.
    """
    if tokenizer.peek() == EMPTY:
        tokenizer.consume(EMPTY)
        return None

    stack = _TermStack(tokenizer)
    while True:
        token = tokenizer.peek()
        if _is_term_end(token):
            break

        elif IDENTIFIER.fullmatch(token):
            stack.check_before_unary()
            stack.push(Variable(tokenizer.take()))
            stack.reduce()

        elif token == NOT:
            stack.check_before_unary()
            stack.push(tokenizer.take())

        elif token == AND:
            stack.check_before_binary()
            stack.push(tokenizer.take())

        elif token == OR:
            stack.check_before_binary()
            stack.final_reduce()
            stack.push(tokenizer.take())

        elif token == "(":
            stack.check_before_unary()
            stack.push(tokenizer.take())

        elif token == ")":
            stack.final_reduce()
            if len(stack) < 2 or stack.items[-2] != "(" or not stack.top_is_term():
                raise stack.error("Binary operator without second operand")
            tokenizer.consume(")")
            del stack.items[-2]
            stack.reduce()

        elif token == EMPTY:
            raise stack.error("Empty not expected")

        else:
            raise InternalError(f"Unhandled token {token!r}")

    stack.final_reduce()

    if len(stack) == 1 and stack.top_is_term():
        return stack.items[0]
    elif len(stack) == 0:
        raise stack.error("Blank term")
    else:
        raise stack.error("Expected more")


def _parse_side(tokenizer: Tokenizer, is_left: bool) -> List[Term]:
    """Parse a comma-separated side up to the turnstile (left) or the end (right)."""
    terms: List[Term] = []
    expect_comma = False
    saw_empty = False
    while True:
        token = tokenizer.peek()
        if is_left and token == TURNSTILE:
            tokenizer.consume(TURNSTILE)
            break
        elif is_left and token is None:
            raise SequentSyntaxError("Comma or turnstile expected", tokenizer.pos)
        elif not is_left and token is None:
            break
        elif not is_left and token == TURNSTILE:
            raise SequentSyntaxError("Turnstile not expected", tokenizer.pos)

        if saw_empty:
            raise SequentSyntaxError(
                "Turnstile expected" if is_left else "End expected", tokenizer.pos)

        if expect_comma:
            if token != ",":
                raise SequentSyntaxError("Comma expected", tokenizer.pos)
            tokenizer.consume(",")
            if tokenizer.peek() is None:
                raise SequentSyntaxError("Term expected", tokenizer.pos)
        elif token == ",":
            raise SequentSyntaxError(
                "Term or turnstile expected" if is_left else "Term or end expected",
                tokenizer.pos)
        expect_comma = True

        position = tokenizer.pos
        term = parse_term(tokenizer)
        if term is None:
            if terms:
                raise SequentSyntaxError("Empty not expected", position)
            saw_empty = True
        else:
            terms.append(term)
    return terms


def parse_sequent(tokenizer: Tokenizer) -> Sequent:
    """Parse a whole sequent ``left ⊦ right`` from the tokenizer."""
    left = _parse_side(tokenizer, is_left=True)
    right = _parse_side(tokenizer, is_left=False)
    return Sequent(left, right)


def parse_sequent_string(text: str) -> Sequent:
    """Parse a sequent from a string."""
    return parse_sequent(Tokenizer(text))


def parse_term_string(text: str) -> Term:
    """Parse a single term that must span the whole string."""
    tokenizer = Tokenizer(text)
    term = parse_term(tokenizer)
    if term is None:
        raise SequentSyntaxError("Empty not expected", 0)
    if not tokenizer.at_end():
        raise SequentSyntaxError("End expected", tokenizer.pos)
    return term
