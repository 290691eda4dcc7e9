# respell

A library for building phonetic respellings of English words. Words are
lists of glyphs. Rewrite rules turn spellings into sounds, and those rules
compile into lookups that behave like contextual substitutions in font
features.

## Modules

- `respell.glyphs`: the `Glyph` enum (Latin letters plus phonetic symbols
  such as `ʃ`, `θ`, `ə`) and `Synthetic(number)` placeholder glyphs.
  - Text codecs: `encode`/`decode` and `aug_encode`/`aug_decode`. In the
    `aug_` forms, `{n}` stands for `Synthetic(n)`.
  - Feature-file names: `Glyph.fea_name`, `Glyph.from_name`, `aug_name`,
    `aug_from_name`.
  - Helpers: `augment` and `strip_aug`.
- `respell.substitutions`: single-glyph `Substitution` rules. A
  `SubstitutionList` holds them, with `Barrier` items separating the groups.
  It provides `apply_at_pos`, `apply_all_pos`, and `render` to feature-file
  text.
- `respell.substitutions2`: contextual substitutions.
  - A `Substitution` has `pre_key`, `at_key` and `post_key`, and its
    `sub_content` is either a list of glyphs or `Ignore()`. Key elements may
    be `AnyLetter()`.
  - Substitutions are grouped into `Lookup`s inside a `SubstitutionList`.
  - `apply_all` runs each lookup over a word in place.
  - `apply_all_with_new` also reports whether any of the first `new_amount`
    substitutions matched.
- `respell.hl_rules`: high-level rules, written as `pre[at]post→mid→content`,
  optionally anchored with `^` and `$` (for example `^[to]$→11→tu`).
  - `HLSubstitution.decode` and `HLSubstitution.encode` convert to and from
    that notation.
  - `Anterior.apply` replaces matches with `Synthetic(mid)`.
  - `Posterior.apply` expands the placeholders again, and `Posterior.deapply`
    reverses it.
  - `low_level` produces the equivalent contextual substitutions.
- `respell.hl_rule_list`: `HLSubstitutionList`, an ordered list of
  high-level rules.
  - `decode` parses one rule per line and checks back-references.
  - `apply` runs every anterior in order, then every posterior in reverse
    order.
  - `low_level` compiles the list into lookups that give the same result.
  - `next_open_mid` returns the smallest unused mid.
- `respell.readlex`: converts Shavian spellings to glyphs with
  `shaw_char_to_glyphs`, `shaw_word_to_glyphs`,
  `shaw_word_to_glyphs_with_fixes` and `fix_final_ih`.
  `read_readlex_top5000(path)` loads a JSON list of entries into
  `ReadlexEntry` objects. By default it reads
  `res/readlex-entries-top5000.json` relative to the working directory.
- `respell.gaussians`: an immutable `Gaussian` with `add_indep`,
  `remove_indep`, `shift`, `scale`, `add_const` and `restrict_above`
  (truncation to values above a cut-off).
- `respell.expectation_table` and `respell.expectation_table2`: estimate how
  a candidate rule changes the frequency-weighted distance over a list of
  words.
  - The first module uses Gaussian estimates.
  - The second uses sum-of-squares bounds, read with `calc_best_possible`
    and `calc_worst_possible`.
  - In both, `build_expectation_table`, `introduce_edit` and `update_edit`
    build and refine an estimate word by word.

## Installation

```
pip install .
```

## Example

```python
from respell.glyphs import aug_decode, aug_encode
from respell.hl_rule_list import HLSubstitutionList
from respell.substitutions2 import apply_all

rules = HLSubstitutionList.decode("""
    a[b]→0→c
    [a]→1→d
""")

word = aug_decode("ab")
print(aug_encode(rules.apply_copied_always(word)))   # dc

compiled = rules.low_level()
apply_all(word, compiled)                             # changes word in place
print(aug_encode(word))                               # dc
```

## What it does not do

- It is a library only. There is no command-line tool.
- It ships no ready-made rule set and no word-list data. The ReadLex JSON
  file must be supplied by the user.
- It does not parse IPA transcriptions.
- It does not build fonts or shape text with one. Compiled lookups are
  applied in Python by `apply_all`.

## Running the tests

```
pip install .[test]
pytest
```