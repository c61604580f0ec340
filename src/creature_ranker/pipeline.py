from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable, Sequence

from creature_ranker.classify import admit, classify
from creature_ranker.clients.creatures import CreatureApiClient, CreatureSource
from creature_ranker.errors import PayloadShapeFailure
from creature_ranker.ranking import TOP_FLIERS, Ranking, build_ranking
from creature_ranker.settings import CreatureRankerSettings, settings as default_settings

logger = logging.getLogger(__name__)


def _log_error(line: str) -> None:
    logger.error(f"Ranking run failed: {line}")


def _names(creatures) -> str:
    return ",".join(c.name for c in creatures)


def format_summary(ranking: Ranking) -> list[str]:
    return [
        f"This is the list of creatures, ordered by difficulty: {_names(ranking.by_difficulty)}.",
        "This is the quickest swimming creature in the current list: "
        f"{ranking.quickest_swimmer.name}.",
        f"These are the {TOP_FLIERS} quickest flying creatures: {_names(ranking.fastest_fliers)}.",
    ]


class RankingRun:
    """One fetch -> classify -> rank -> print pass.

    Failures never escape `run()`: each is reported once on the error sink
    (the ERROR log by default) and the run returns None. `loading` is True
    only while a run is in progress.
    """

    def __init__(
        self,
        source: CreatureSource,
        *,
        out: Callable[[str], None] = print,
        err: Callable[[str], None] = _log_error,
    ):
        self._source = source
        self._out = out
        self._err = err
        self.loading = False

    async def run(self) -> Ranking | None:
        self.loading = True
        try:
            records = await self._source.fetch_records()
            if not isinstance(records, Sequence) or isinstance(records, (str, bytes)):
                raise PayloadShapeFailure()
            creatures = admit(records)
            ranking = build_ranking(classify(creatures))

            for line in format_summary(ranking):
                self._out(line)
            return ranking
        except Exception as e:
            self._err(str(e))
            return None
        finally:
            self.loading = False


async def run_once(
    cfg: CreatureRankerSettings | None = None,
    *,
    out: Callable[[str], None] = print,
    err: Callable[[str], None] = _log_error,
) -> Ranking | None:
    cfg = cfg or default_settings
    client = CreatureApiClient(base_url=cfg.api_base_url, path=cfg.creatures_path)
    try:
        return await RankingRun(client, out=out, err=err).run()
    finally:
        await client.aclose()


if __name__ == "__main__":
    asyncio.run(run_once())
