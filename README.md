# drillbook

Worked answers to a set of small programming exercises, written as plain
Python functions and classes and grouped by topic, together with a few
helpers for styled terminal output.

## Installation

```
pip install .
```

The package has no dependencies beyond the standard library. It needs
Python 3.11 or later.

## Worked answers

`drillbook.lessons` holds one module per topic:

- `basics`: values, functions, branching, strings and modules:
  `calculate_apple_price`, `times_two`, `is_even`, `sale_price`, `square`,
  `call_me`, `bigger`, `fizz_if_foo`, `classify_character`, `middle_slice`,
  `current_favorite_color`, `is_a_color_word`, `make_sausage`,
  `seconds_since_epoch`, `hello_macro`, `macro_message`, `echo`.
- `containers`: lists, tuples and dictionaries: `fruit_basket`,
  `fill_basket` with the `Fruit` enum, `array_and_vec`, `vec_loop`.
- `enums`: tagged messages (`Move`, `Echo`, `ChangeColor`, `Quit`) processed
  by `GameState.process`, and optional values: `print_number`, `drain_some`,
  `describe_point`, `add_optional`, plus `circle_area`.
- `errors`: `generate_nametag_text`, `total_cost`, `buy_items`,
  `PositiveNonzeroInteger.new` with `CreationError`, and `parse_pos_nonzero`
  with `ParsePosNonzeroError`.
- `advanced_errors`: `parse_positive_nonzero`, and `Climate.parse`, which
  raises `ParseClimateError` with a `ClimateErrorKind` and a readable message.
- `move_semantics`: `fill_vec`, `fill_in_place`, `fill_new_vec`, `bump`.
- `stdlib_types`: `offset_sums` (one thread per offset), the `Cons` list,
  `capitalize_first` and friends, `divide` with `NotDivisibleError` and
  `DivideByZeroError`, `result_with_list`, `list_of_results`, `factorial`,
  and counting with the `Progress` enum.
- `structs`: `ColorClassic`, `ColorTuple`, `UnitStruct`, `Order` with
  `create_order_template`, `Package`, `Wrapper`, `ReportCard.render`,
  `shopping_list`, and `append_bar` for strings and lists of strings.
- `threads`: `run_jobs`, which completes jobs on a worker thread while the
  caller waits, and returns a `JobStatus`.

```python
from drillbook.lessons.basics import calculate_apple_price
from drillbook.lessons.advanced_errors import Climate, ParseClimateError

calculate_apple_price(35)          # 70
calculate_apple_price(65)          # 65
Climate.parse("Munich,2015,23.1")  # Climate(city='Munich', year=2015, temp=23.1)

try:
    Climate.parse(",1997,20.5")
except ParseClimateError as error:
    print(error)                   # no city name
```

Failures are raised as exceptions: for example `divide(81, 0)` raises
`DivideByZeroError`, and `Package("Spain", "Austria", -2210)` raises
`ValueError`.

## Terminal helpers

`drillbook.ui` provides:

- `bold`, `red`, `green`, `blue`: wrap text in ANSI styles when standard
  output is a terminal. Set `NO_COLOR` to turn styling off, or
  `CLICOLOR_FORCE` to a non-zero value to force it on.
- `warn` and `success`: print a red warning or green success line with a
  leading symbol.
- `no_emoji`: true when `NO_EMOJI` is set; `warn` and `success` then use
  plain symbols instead of emoji.
- `Spinner`: a context manager that draws a spinner with a message on
  standard error while work runs; nothing is drawn when standard error is
  not a terminal.

```python
from drillbook.ui import Spinner, success

with Spinner("Working...") as spinner:
    spinner.set_message("Almost done...")
success("Finished")
```

## What this package does not do

There is no command-line program. The package does not compile, run or test
exercise files, read an exercise list, track which exercises are done, give
hints, or watch files for changes. It has no worked answers for the
conversions topic.

## Running the tests

```
pip install ".[test]"
pytest
```