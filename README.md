# promptdir

Helpers for rendering the current directory in a shell prompt: contract a
path to the home directory or a repository root, and abbreviate the leading
components in the style of the fish shell.

## Installation

```
pip install promptdir
```

## Usage

```python
from promptdir.directory import contract_path, to_fish_style

contract_path("/Users/astronaut/schematics/rocket", "/Users/astronaut", "~")
# '~/schematics/rocket'

contract_path(
    "/Users/astronaut/dev/rocket-controls/src",
    "/Users/astronaut/dev/rocket-controls",
    "rocket-controls",
)
# 'rocket-controls/src'

to_fish_style(1, "~/starship/engines/booster/rocket", "engines/booster/rocket")
# '~/s/'

to_fish_style(1, "~/.starship/engines/booster/rocket", "engines/booster/rocket")
# '~/.s/'
```

All functions live in `promptdir.directory`.

### `contract_path(full_path, top_level_path, top_level_replacement)`

Accepts strings or path-like objects. If `full_path` lies under
`top_level_path` (compared by whole path components), the leading
`top_level_path` is replaced with `top_level_replacement` and the rest is
joined on with `/`. If the two paths are equal, the replacement alone is
returned. A path outside `top_level_path` is returned unchanged, in
forward-slash form.

### `to_fish_style(pwd_dir_length, dir_string, truncated_dir_string)`

Removes every trailing occurrence of `truncated_dir_string` from
`dir_string`, then shortens each remaining `/`-separated component to its
first `pwd_dir_length` grapheme clusters. Components starting with `.` keep
the dot plus that many clusters. Components no longer than
`pwd_dir_length` are left as they are. Grapheme clusters are counted, so
combining marks stay with their base character:

```python
to_fish_style(1, "~/starship/tmp/目录/a̐éö̲/目录", "目录")
# '~/s/t/目/a̐/'
```

### `replace_c_dir(path)`

On Windows, rewrites every `C:/` in the string to `/c`. Elsewhere the path
is returned unchanged.

## What this package does not do

It provides only the path helpers. It does not render a prompt, read any
configuration, look up the current or home directory, detect repository
roots, apply colours, or limit a path to a number of components; callers
supply the paths and the truncated tail themselves. There is no command-line
program.