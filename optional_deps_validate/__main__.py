"""Allow ``python -m optional_deps_validate``."""

from optional_deps_validate.cli import main

main(prog_name="optional-deps-validate")
