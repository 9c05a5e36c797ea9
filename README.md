# codesuggest

codesuggest provides the phases of a small compiler for a tiny subset of C. It is meant for learning. Each phase is a plain Python function.

- **Lexing** (`codesuggest.lexer`). `tokenize(code)` splits source text into `Token`s, each with a `TokenType`, a value and a line number. The last token is always an `EOF` token. It returns a `LexResult` with two fields. `tokens` holds the tokens. `messages` holds, in order:
  - warnings for unknown characters, backspaces and unterminated strings;
  - "Did you mean ...?" hints for identifiers that are one or two letters away from a keyword such as `int` or `while`.

  `format_tokens` renders the tokens as `Token Type: ..., Value: ...` lines, and `write_tokens` writes those lines to a file.
- **Parsing** (`codesuggest.parser`). `parse_tokens(tokens)` runs a recursive-descent parser over the tokens. It returns the parse tree as Graphviz DOT text. `write_parse_tree(tokens, path)` does the same and also writes the text to a file. The first syntax error raises `ParseError`. The exception carries `error_type`, `message`, the offending `token` and, where one applies, a type-keyword `suggestion`.
- **Semantic checks** (`codesuggest.semantic`). `check_semantics(tokens)` raises `SemanticError` on any of these:
  - undeclared or redeclared variables;
  - strings assigned to `int` or `float` variables;
  - division by the literal `0`;
  - an invalid return value;
  - malformed `if`, `while` and `for` headers;
  - an `int main` without a `return`.

  When the checks pass, it returns a list of messages: any warnings and hints, followed by a final "Semantic analysis passed" line. A warning is given, for example, for division by a variable.
- **Target code** (`codesuggest.tcg`). This phase turns three-address code into instructions for a simple accumulator machine. The instructions are `LOAD`, `STORE`, `ADD`, `SUB`, `MUL`, `DIV`, `JMP`, the conditional jumps and `OUT`.
  - `translate_line` handles one line.
  - `generate_target_code` handles a string or an iterable of lines. It logs lines it does not recognise and skips them.
  - `generate_target_file(ir_path, target_path)` reads one file and writes the other.
- **Suggestions** (`codesuggest.suggest`). `suggest_keyword(word, candidates)` returns the first candidate of the same length that differs from `word` in one or two places. `format_suggestion` wraps the result in a "Did you mean" message that includes the line number.

## Installation

```
pip install .
```

## Example

```python
from codesuggest.lexer import tokenize
from codesuggest.parser import parse_tokens
from codesuggest.semantic import check_semantics
from codesuggest.tcg import generate_target_code

source = "int main() { int a; a = 1 + 2; return a; }"
result = tokenize(source)           # LexResult: tokens plus warnings and hints
dot = parse_tokens(result.tokens)   # DOT text; raises ParseError on bad syntax
check_semantics(result.tokens)      # raises SemanticError on bad meaning

target = generate_target_code("t0 = b * c\na = t0\nreturn a")
# ['LOAD b', 'MUL c', 'STORE t0', 'LOAD t0', 'STORE a', 'LOAD a', 'OUT']
```

```python
from codesuggest.suggest import suggest_keyword

suggest_keyword("whlie", ["for", "while"])   # -> "while"
```

## What it does not do

The package has no command-line program. To run a source file through the phases, call the functions above yourself.

It also does not turn tokens into three-address code. The target-code phase works only on three-address text that you supply.