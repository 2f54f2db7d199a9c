"""Pratt parser building a syntax tree from tokens."""

from __future__ import annotations

from lovely.lexer import Lexer
from lovely.span import Span
from lovely.syntax import (
    BoolLiteral,
    Expression,
    ExpressionStatement,
    Function,
    FunctionArgument,
    FunctionCall,
    FunctionParameter,
    Ident,
    Infix,
    InfixOperator,
    IntLiteral,
    LabeledParameter,
    Precedence,
    Prefix,
    PrefixOperator,
    Program,
    TypeName,
    UnitLiteral,
    UnlabeledParameter,
    VariableDecl,
)
from lovely.tokens import Token, TokenKind

__all__ = [
    "ParseError",
    "NoTokenError",
    "NoPrefixParseFnError",
    "ExpectedError",
    "LovelySyntaxError",
    "UnexpectedEofError",
    "Parser",
    "parse",
]


class ParseError(Exception):
    """Base class of every error the parser raises."""


class NoTokenError(ParseError):
    """No token was available where one was required."""

    def __init__(self) -> None:
        super().__init__("no token")


class NoPrefixParseFnError(ParseError):
    """The token cannot start an expression."""

    def __init__(self, kind: TokenKind) -> None:
        super().__init__(f"no expression can start with {kind}")
        self.kind = kind


class ExpectedError(ParseError):
    """A different token was expected."""

    def __init__(self, expected: str, got: str) -> None:
        super().__init__(f"expected {expected}, got {got}")
        self.expected = expected
        self.got = got


class LovelySyntaxError(ParseError):
    """A general syntax error."""

    def __init__(self, detail: str) -> None:
        self.message = f"syntax error: {detail}"
        super().__init__(self.message)


class UnexpectedEofError(ParseError):
    """The input ended in the middle of a construct."""

    def __init__(self) -> None:
        super().__init__("unexpected end of input")


_INFIX = {
    TokenKind.PLUS: (InfixOperator.PLUS, Precedence.SUM),
    TokenKind.MINUS: (InfixOperator.MINUS, Precedence.SUM),
    TokenKind.ASTERISK: (InfixOperator.MULTIPLY, Precedence.PRODUCT),
    TokenKind.SLASH: (InfixOperator.DIVIDE, Precedence.PRODUCT),
    TokenKind.GREATER_THAN: (InfixOperator.GREATER_THAN, Precedence.COMPARISON),
    TokenKind.LESS_THAN: (InfixOperator.LESS_THAN, Precedence.COMPARISON),
    TokenKind.GREATER_THAN_OR_EQUAL: (
        InfixOperator.GREATER_THAN_OR_EQUAL,
        Precedence.COMPARISON,
    ),
    TokenKind.LESS_THAN_OR_EQUAL: (
        InfixOperator.LESS_THAN_OR_EQUAL,
        Precedence.COMPARISON,
    ),
    TokenKind.DOUBLE_EQUAL: (InfixOperator.EQUAL, Precedence.EQUALITY),
    TokenKind.NOT_EQUAL: (InfixOperator.NOT_EQUAL, Precedence.EQUALITY),
}

_PREFIX_TOKEN = {
    PrefixOperator.LOGICAL_NOT: TokenKind.EXCLAMATION_MARK,
    PrefixOperator.NEGATIVE: TokenKind.MINUS,
}


class Parser:
    """Parses one source text into a :class:`Program`."""

    def __init__(self, source: str) -> None:
        self.source = source
        self._lexer = Lexer(source)
        self._lookahead: Token | None = None

    # token stream

    def _peek(self) -> Token | None:
        if self._lookahead is None:
            self._lookahead = next(self._lexer, None)
        return self._lookahead

    def _advance(self) -> Token | None:
        token = self._peek()
        self._lookahead = None
        return token

    def _peek_kind(self) -> TokenKind:
        token = self._peek()
        return TokenKind.EOF if token is None else token.kind

    def _expect(self, kind: TokenKind) -> Span:
        token = self._advance()
        if token is None:
            raise UnexpectedEofError()
        if token.kind is not kind:
            raise LovelySyntaxError(f"unexpected token: {token.kind}")
        return token.span

    def _expect_ident(self) -> tuple[str, Span]:
        token = self._peek()
        if token is None:
            raise UnexpectedEofError()
        if token.kind is not TokenKind.IDENTIFIER:
            raise ExpectedError("identifier", str(token.kind))
        self._advance()
        return token.span.slice(self.source), token.span

    def _expect_int(self) -> tuple[int, Span]:
        token = self._peek()
        if token is None:
            raise UnexpectedEofError()
        if token.kind is not TokenKind.INT_LITERAL:
            raise ExpectedError("int literal", str(token.kind))
        self._advance()
        return int(token.span.slice(self.source)), token.span

    def _cur_precedence(self) -> Precedence:
        kind = self._peek_kind()
        if kind in _INFIX:
            return _INFIX[kind][1]
        if kind is TokenKind.LPAREN:
            return Precedence.GROUP
        return Precedence.LOWEST

    # grammar

    def parse(self) -> Program:
        """Parse statements until the input runs out."""
        statements = []
        while self._peek() is not None:
            statements.append(self._parse_expression_statement())
        return Program(tuple(statements))

    def _parse_expression_statement(self) -> ExpressionStatement:
        expr = self._parse_expression(Precedence.LOWEST)
        discarded = self._peek_kind() is TokenKind.SEMICOLON
        if discarded:
            self._advance()
        return ExpressionStatement(expr, discarded)

    def _parse_expression(self, precedence: Precedence) -> Expression:
        expr = self._parse_prefix_position()
        while self._cur_precedence() > precedence:
            kind = self._peek_kind()
            if kind not in _INFIX:
                raise LovelySyntaxError(f"invalid operator: {kind}")
            operator, operator_precedence = _INFIX[kind]
            expr = self._parse_infix(expr, operator, operator_precedence)
        return expr

    def _parse_prefix_position(self) -> Expression:
        kind = self._peek_kind()
        if kind is TokenKind.INT_LITERAL:
            value, span = self._expect_int()
            return Expression(IntLiteral(value), span)
        if kind in (TokenKind.TRUE, TokenKind.FALSE):
            span = self._expect(kind)
            return Expression(BoolLiteral(kind is TokenKind.TRUE), span)
        if kind is TokenKind.UNIT:
            return Expression(UnitLiteral(), self._expect(TokenKind.UNIT))
        if kind is TokenKind.LPAREN:
            return self._parse_grouped()
        if kind is TokenKind.IDENTIFIER:
            name, span = self._expect_ident()
            following = self._peek_kind()
            if following is TokenKind.COLON:
                return self._parse_variable_declaration(name, span.start)
            if following is TokenKind.LPAREN:
                return self._parse_function_call(name, span.start)
            return Expression(Ident(name), span)
        if kind is TokenKind.FUN:
            return self._parse_function()
        if kind is TokenKind.EXCLAMATION_MARK:
            return self._parse_prefix(PrefixOperator.LOGICAL_NOT)
        if kind is TokenKind.MINUS:
            return self._parse_prefix(PrefixOperator.NEGATIVE)
        raise NoPrefixParseFnError(kind)

    def _parse_prefix(self, operator: PrefixOperator) -> Expression:
        start = self._expect(_PREFIX_TOKEN[operator]).start
        operand = self._parse_expression(Precedence.PREFIX)
        return Expression(Prefix(operator, operand), Span(start, operand.span.end))

    def _parse_infix(
        self, lhs: Expression, operator: InfixOperator, precedence: Precedence
    ) -> Expression:
        self._advance()
        rhs = self._parse_expression(precedence)
        return Expression(Infix(lhs, operator, rhs), Span(lhs.span.start, rhs.span.end))

    def _parse_type(self) -> TypeName:
        name, _ = self._expect_ident()
        return TypeName(name)

    def _parse_grouped(self) -> Expression:
        start = self._expect(TokenKind.LPAREN).start
        expr = self._parse_expression(Precedence.LOWEST)
        kind = self._peek_kind()
        if kind is not TokenKind.RPAREN:
            raise ExpectedError(")", str(kind))
        end = self._expect(TokenKind.RPAREN).end
        return Expression(expr.kind, Span(start, end))

    def _parse_function_call(self, name: str, start: int) -> Expression:
        self._expect(TokenKind.LPAREN)
        arguments = []
        while self._peek_kind() is not TokenKind.RPAREN:
            arguments.append(self._parse_function_argument())
            if self._peek_kind() is not TokenKind.COMMA:
                break
            self._expect(TokenKind.COMMA)
        end = self._expect(TokenKind.RPAREN).end
        return Expression(FunctionCall(name, tuple(arguments)), Span(start, end))

    def _parse_function_argument(self) -> FunctionArgument:
        token = self._peek()
        if token is None:
            raise UnexpectedEofError()
        if token.kind is not TokenKind.IDENTIFIER:
            return FunctionArgument(None, self._parse_expression(Precedence.LOWEST))
        name, _ = self._expect_ident()
        if self._peek_kind() is TokenKind.COLON:
            self._expect(TokenKind.COLON)
            return FunctionArgument(name, self._parse_expression(Precedence.LOWEST))
        return FunctionArgument(None, Expression(Ident(name), token.span))

    def _parse_variable_declaration(self, name: str, start: int) -> Expression:
        self._expect(TokenKind.COLON)
        ty = None
        if self._peek_kind() in (TokenKind.IDENTIFIER, TokenKind.FUN):
            ty = self._parse_type()

        kind = self._peek_kind()
        if kind is TokenKind.COLON:
            mutable = False
        elif kind is TokenKind.SINGLE_EQUAL:
            mutable = True
        else:
            raise ExpectedError(": or =", str(kind))
        self._expect(kind)
        value = self._parse_expression(Precedence.LOWEST)
        return Expression(
            VariableDecl(name, value, mutable, ty), Span(start, value.span.end)
        )

    def _parse_function(self) -> Expression:
        start = self._expect(TokenKind.FUN).start
        self._expect(TokenKind.LPAREN)
        parameters = []
        while self._peek_kind() is not TokenKind.RPAREN:
            parameters.append(self._parse_function_parameter())
            if self._peek_kind() is not TokenKind.COMMA:
                break
            self._expect(TokenKind.COMMA)
        self._expect(TokenKind.RPAREN)

        return_type = None
        if self._peek_kind() is TokenKind.IDENTIFIER:
            return_type = self._parse_type()

        self._expect(TokenKind.LBRACE)
        body = []
        while self._peek_kind() is not TokenKind.RBRACE:
            body.append(self._parse_expression_statement())
        end = self._expect(TokenKind.RBRACE).end

        return Expression(
            Function(tuple(parameters), return_type, tuple(body)), Span(start, end)
        )

    def _parse_function_parameter(self) -> FunctionParameter:
        kind = self._peek_kind()
        if kind is TokenKind.TILDE:
            self._expect(TokenKind.TILDE)
            name, _ = self._expect_ident()
            self._expect(TokenKind.COLON)
            return UnlabeledParameter(name, self._parse_type())
        if kind is TokenKind.IDENTIFIER:
            first, _ = self._expect_ident()
            second = None
            if self._peek_kind() is TokenKind.IDENTIFIER:
                second, _ = self._expect_ident()
            self._expect(TokenKind.COLON)
            ty = self._parse_type()
            if second is None:
                return LabeledParameter(first, None, ty)
            return LabeledParameter(second, first, ty)
        raise ExpectedError("parameter name", str(kind))


def parse(source: str) -> Program:
    """Parse ``source`` into a :class:`Program`."""
    return Parser(source).parse()