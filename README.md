# lovely

Front-end pieces for **Lovely**, a small expression-oriented language:
a lexer, a Pratt parser that builds a syntax tree, and the data model
of a type checker.

## Installing

```
pip install .
```

## The language at a glance

```
# variable declaration
foo :: 4;          # immutable binding
bar : Int = 33;    # mutable binding with a type

unit;

calc :: fun (~x: Int, ~y: Int) Int {
  z :: x / y;
  z * z
};

calc(foo, bar)
```

Comments run from `#` to the end of the line. A statement followed by
`;` is recorded as discarded. Parameters written with `~` are unlabelled;
others are labelled, optionally with a separate external name:
`fun (to target: Int) ...` gives a parameter whose internal name is
`target` and whose external name is `to`. Call arguments may carry a
label as well: `move(to: 3)`.

Expressions understood by the parser: integer literals, `true`, `false`,
`unit`, names, parentheses, prefix `!` and `-`, infix `+ - * /`,
`< > <= >=` and `== !=`, variable declarations, `fun` expressions and
function calls.

## Tokenising

```python
from lovely.lexer import tokenize

source = "x :: 1 + 2"
for token in tokenize(source):
    print(token.kind, token.span.slice(source))
```

`Lexer(source)` is an iterator of `Token` objects from `lovely.tokens`;
each token has a `kind` (a `TokenKind`) and a `span` (a `Span` of
character offsets). Iteration stops at the end of the input. A character
that starts no token raises `LexError`, which carries the `char` and its
`position`.

The lexer also recognises `&`, `|`, `^` and `~`; of these the parser
only uses `~`, to mark unlabelled parameters.

## Parsing

```python
from lovely.parser import parse

program = parse("a :: 1 + 2 * 3;")
statement = program.statements[0]
print(statement.discarded, statement.expr)
```

`parse(source)`, or `Parser(source).parse()`, returns a `Program`, which
iterates over its `ExpressionStatement`s. Each statement holds an
`Expression` whose `kind` is one of the nodes in `lovely.syntax`:
`IntLiteral`, `BoolLiteral`, `UnitLiteral`, `Ident`, `Prefix`, `Infix`,
`VariableDecl`, `Function` or `FunctionCall`, and whose `span` covers it
in the source. All nodes are frozen dataclasses and compare by value.

Errors are raised as subclasses of `ParseError`: `ExpectedError`
(with `expected` and `got`), `LovelySyntaxError`, `UnexpectedEofError`,
`NoPrefixParseFnError` (with the offending `kind`) and `NoTokenError`.

## Source positions

```python
from lovely.span import Span, line_col

span = Span(9, 10)
print(span.line_col_start("hi there\nI am Tom"))
```

`line_col(text, index)` turns a character index into a 1-based
`(line, column)` pair; `Span.line_col_start`, `Span.line_col_end` and
`Span.slice` work on a span's two ends.

## Checker data model

`lovely.checker` defines the state a type checker works on: `Scope`,
`ScopedVariable`, `ScopedType` (with `NamedType` and `FunctionType`
kinds), the builtin type ids `INT_ID`, `BOOL_ID` and `UNIT_ID`, and
`CheckError`, whose `kind` is a `TypeMismatch`, `VariableNotFound` or
`TypeNotFound`. A new `Checker` starts with the root scope and the
builtin types `Int`, `Bool` and `Unit`.

## What this package does not do

There is no checking pass: `Checker` holds state but nothing walks a
`Program` to type-check it, and nothing in the package raises
`CheckError`. Programs are not evaluated or compiled, and there is no
command-line tool.

## Running the tests

```
pip install .[test]
pytest
```