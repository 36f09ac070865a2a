# drillrunner

drillrunner is a small library for a course of programming drills. It has
three parts:

- coloured status lines for reporting progress (`drillrunner.ui`);
- a builder for the `rust-project.json` file that lets the rust-analyzer
  language server understand a folder of exercise files
  (`drillrunner.project`);
- worked solutions to the course's exercises, as plain Python functions and
  classes you can call and test.

It needs Python 3.11 or later and depends on `rich`.

## Status output

```python
from drillrunner.ui import warn, success, no_emoji

success("Successfully ran exercises/intro/intro1.rs")
warn("Compiling of exercises/intro/intro2.rs failed!")
```

`warn` prints a red line and `success` a green one; both return the plain text
they printed. When the `NO_EMOJI` environment variable is set (`no_emoji()`
returns `True`), the lines start with `!` and `✓` instead of emoji.

## rust-analyzer project files

```python
from drillrunner.project import RustAnalyzerProject

project = RustAnalyzerProject()
project.get_sysroot_src()
project.exercises_to_json("exercises")
project.write_to_disk("rust-project.json")
```

- `get_sysroot_src()` uses `RUST_SRC_PATH` when it is set; otherwise it runs
  `rustc --print sysroot` and points at `lib/rustlib/src/rust/library` below
  the toolchain it reports (printing the toolchain it found).
- `exercises_to_json(root="exercises")` adds one `Crate` for every `.rs` file
  below `root`, in sorted order; `add_path(path)` adds a single file and
  ignores anything that is not `.rs`. Each crate uses edition `2021`, no
  dependencies and the `test` cfg.
- `to_dict()` gives the project as a dictionary; `write_to_disk(path)` writes
  it as compact JSON (default `./rust-project.json`).

## Exercise solutions

| Module | Contents |
| --- | --- |
| `drillrunner.quizzes` | `calculate_price_of_apples`, `Command` and `transformer`, `ReportCard` |
| `drillrunner.conversions` | `Person.from_text` with a default fallback; `Color.from_tuple`, `from_array`, `from_slice` raising `ColorBadLength` or `ColorIntConversion` |
| `drillrunner.errors` | `parse_int` and `ParseIntError`; `Person.parse` raising `ParsePersonError` subclasses; `generate_nametag_text`; `total_cost`; `PositiveNonzeroInteger.new`; `parse_pos_nonzero` |
| `drillrunner.basics` | message processing with `State` and `ChangeColor`, `Move`, `Quit`, `Echo`; `maybe_icecream`, `sale_price`, `is_even`, `bigger`, `foo_if_fizz`, `animal_habitat` |
| `drillrunner.iteration` | `capitalize_first` and friends; `divide` raising `NotDivisibleError` or `DivideByZeroError`; `result_with_list`, `list_of_results`; `factorial`; `Progress` counts |
| `drillrunner.tallies` | `starter_basket`, `Fruit` and `fill_basket`, `build_scores_table` with `Team`, `vec_loop`, `vec_map`, `Wrapper` |
| `drillrunner.textops` | `is_a_color_word`, `trim_me`, `compose_me`, `replace_me`, `longest`, `append_bar` |
| `drillrunner.objects` | `Package`, `Licensed` with `SomeSoftware` and `OtherSoftware`, `compare_license_types`, cons lists with `Cons` and `Nil` |

A few examples:

```python
from drillrunner.quizzes import Command, ReportCard, calculate_price_of_apples, transformer
from drillrunner.errors import total_cost, parse_pos_nonzero
from drillrunner.tallies import build_scores_table

calculate_price_of_apples(40)     # 80
calculate_price_of_apples(41)     # 41
transformer([("hello", Command.uppercase()), ("foo", Command.append(1))])
# ['HELLO', 'foobar']
ReportCard(grade="A+", student_name="Gary Plotter", student_age=11).render()
# 'Gary Plotter (11) - achieved a grade of A+'

total_cost("34")                  # 171
total_cost("beep boop")           # raises ParseIntError: invalid digit found in string
parse_pos_nonzero("0")            # raises ParsePosNonzeroError wrapping CreationErrorZero

scores = build_scores_table("England,France,4,2\nGermany,England,2,1\n")
scores["England"].goals_scored    # 5
```

Errors that the exercises report as results are raised as exceptions, and
the error classes compare equal by kind, so tests can check which error came
back.

## What drillrunner does not do

drillrunner has no command-line program. It does not compile, run or lint
exercise files, does not read a course's list of exercises, does not check
for the `I AM NOT DONE` marker or track which exercises are finished, has no
watch mode, hints or list of progress, and does not reset exercises. The only
outside program it starts is `rustc --print sysroot`, from
`RustAnalyzerProject.get_sysroot_src()`.

## Tests

```
pip install -e ".[test]"
pytest
```