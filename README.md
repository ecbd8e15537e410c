# coursebook

Tooling for a book-based programming course, together with reference
solutions to the course's exercises.

Install with `pip install .`; the test dependencies come with
`pip install .[test]`.

## The course preprocessor: `coursebook-course`

A book preprocessor. It reads a `[context, book]` JSON pair on standard
input, works out the course structure from the order of chapters and the
YAML frontmatter at the top of each chapter, and writes the book back to
standard output as JSON with the frontmatter removed.

The structure (`coursebook.course`) is a hierarchy:

- **`Course`** – named by `course:` in a top-level chapter's frontmatter;
  `course: none` ends the current course.
- **`Session`** – named by `session:`. A chapter that sets `course:` must
  also set `session:`.
- **`Segment`** – each top-level chapter inside a session.
- **`Slide`** – the segment's chapter itself, and each of its sub-chapters
  with their own sub-chapters folded in. `minutes:` gives the time a chapter
  takes. Sub-slides may not set `course:` or `session:`.

```markdown
---
course: Fundamentals
session: Day 1 Morning
minutes: 5
---
```

For every chapter the preprocessor:

- inserts "This slide should take about N minutes." (or "This slide and
  its sub-slides ...") after each `<details>` tag in the first chapter of a
  timed slide;
- replaces the first `{{%...}}` directive in the text:
  - `{{%session outline}}` – the timed segments of the current session;
  - `{{%segment outline}}` – the timed slides of the current segment;
  - `{{%course outline}}` – the schedule of the current course;
  - `{{%course outline NAME}}` – the schedule of the named course (left
    untouched if there is no such course);
  - anything else is replaced by the directive's own text.

Durations above five minutes are rounded up to a multiple of five
(`coursebook.markdown.duration`), and a session's time includes 10-minute
breaks between its timed segments.

```toml
[preprocessor.course]
command = "coursebook-course"
verbose = true
```

With `verbose = true` a timing summary of the course named "Fundamentals"
is printed to standard error. `coursebook-course supports RENDERER` exits
with status 0 for any renderer.

## The exercise extractor: `coursebook-exerciser`

A book renderer. It reads the render context as JSON on standard input and
scans every chapter for an HTML comment `<!-- File NAME -->` followed by a
code block, writing that code block to `NAME`. Each chapter's files go into
a subdirectory named after the stem of the chapter's file.

```toml
[output.exerciser]
command = "coursebook-exerciser"
output-directory = "exercises"
```

The output directory is deleted and created again on every run. The same
extraction is available as `coursebook.exerciser.process(directory, text)`.

## Exercise solutions

`coursebook.exercises` holds the solutions as importable modules:
`collatz`, `fibonacci`, `transpose`, `vectors`, `elevator`, `counter`,
`rot`, `citation`, `offsets`, `package_builder`, `widgets`, `evaluator`,
`binary_tree`, `expression`, `protobuf`, `philosophers`, `link_checker`
and `chat`.

```python
from coursebook.exercises.collatz import collatz_length
from coursebook.exercises.expression import parse
from coursebook.exercises.binary_tree import BinaryTree

collatz_length(11)        # 15
parse("10+foo+20-30")     # an Operation tree
tree = BinaryTree()
tree.insert(3)
3 in tree, len(tree)      # (True, 1)
```

Most modules print a small demonstration when run, for example
`python -m coursebook.exercises.widgets`. Some are also commands:

```sh
coursebook-dining-philosophers [--async] [--rounds N]
coursebook-link-checker https://www.example.com [--threads N]
coursebook-chat-server [--host HOST] [--port PORT]
coursebook-chat-client [--uri ws://127.0.0.1:2000]
```

The chat server listens on `127.0.0.1:2000` by default and broadcasts every
text message it receives to all connected clients; the client sends the
lines typed on standard input and prints what the server sends back.

## What it does not do

The two book commands only transform JSON on standard input and output; they
do not build, render or serve the book themselves, and must be run by the
book tool. The course's embedded, bare-metal and mobile-platform examples
are not included.