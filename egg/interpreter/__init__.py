from __future__ import annotations

import logging
from pathlib import Path
from typing import Literal

from egg import EggValue
from egg.builtin.env_builtin import register
from egg.config import get_prelude_paths
from egg.evaluation.evaluator import Evaluator
from egg.reader.parser import parse
from egg.types.scope import Scope

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Orchestrates parsing and evaluating Egg programs.
    Owns the top scope (built-ins plus any prelude) and one Evaluator.
    """

    def __init__(
        self,
        prelude: str | None | Literal['auto'] = 'auto',
        *,
        evaluator: Evaluator | None = None,
    ):
        self.evaluator = evaluator if evaluator is not None else Evaluator()
        self.top: Scope = Scope()
        register(self.top)

        if prelude is None:
            pass  # explicit: no prelude
        elif prelude == 'auto':
            self._load_prelude_files()
        elif prelude:
            self.eval_prelude(prelude)

    def _load_prelude_files(self) -> None:
        for path in get_prelude_paths():
            if not path.is_file():
                logger.warning("Prelude file not found, skipping: %s", path)
                continue
            logger.debug("Loading prelude %s", path)
            self.eval_prelude(path.read_text(encoding="utf-8"))

    def eval_prelude(self, code: str) -> EggValue:
        """Evaluate code directly in the top scope so its definitions are global."""
        return self.evaluator.evaluate(parse(code), self.top)

    def new_session(self) -> Scope:
        """A child of the top scope whose definitions outlive a single run."""
        return Scope(parent=self.top)

    def run(self, code: str, scope: Scope | None = None) -> EggValue:
        """Parse and evaluate one program.

        Without `scope` every run gets a fresh child of the top scope.
        """
        expr = parse(code)
        if scope is None:
            scope = self.new_session()
        return self.evaluator.evaluate(expr, scope)

    def run_file(self, filename: str | Path, scope: Scope | None = None) -> EggValue:
        path = Path(filename)
        try:
            code = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            raise FileNotFoundError(f"File not found: {filename}") from None
        logger.debug("Running %s", path)
        return self.run(code, scope)
