import concurrent.futures
import multiprocessing
from dataclasses import dataclass
from numbers import Integral
from typing import List, Optional

import numpy as np
from tqdm import tqdm

from mincut.aggregate import summarize
from mincut.contraction import contract
from mincut.cut_size import cut_size
from mincut.errors import InvalidTrialCount
from mincut.graph import Graph

# chunks per worker when chunk_size is not given; keeps the progress bar moving
# without paying a round trip per trial
CHUNKS_PER_WORKER = 4

# graph of the current worker process, set once by the pool initializer
_worker_graph: Optional[Graph] = None


@dataclass(frozen=True)
class MinCutEstimate:
    n: int
    m: int
    minimum: int
    mean_gap: float


def default_workers() -> int:
    # leave 1 core free for the OS
    return max(1, multiprocessing.cpu_count() - 1)


def run_trial(graph: Graph, rng: np.random.Generator) -> int:
    """One contraction followed by evaluation of the resulting cut."""
    cut = contract(graph, rng)
    return cut_size(cut, graph)


def trial_seed(entropy: int, index: int) -> np.random.SeedSequence:
    """
    Seed of trial `index` under a root SeedSequence with this entropy.
    Same state as SeedSequence(entropy).spawn(k)[index], built without
    spawning the children before it.
    """
    return np.random.SeedSequence(entropy, spawn_key=(index,))


def _run_chunk(graph: Graph, entropy: int, start: int, count: int) -> List[int]:
    return [run_trial(graph, np.random.default_rng(trial_seed(entropy, i)))
            for i in range(start, start + count)]


def _init_worker(graph: Graph) -> None:
    global _worker_graph
    _worker_graph = graph


def _worker_chunk(entropy: int, start: int, count: int):
    return start, _run_chunk(_worker_graph, entropy, start, count)


class TrialRunner:
    """
    Runs independent contraction trials on one graph and gathers their cut
    sizes in issuance order.
    """

    def __init__(self,
                 workers: Optional[int] = None,
                 seed: Optional[int] = None,
                 chunk_size: Optional[int] = None,
                 progress: bool = False):
        """
        Args:
            workers (Optional[int]):
                Number of worker processes. None uses all cores but one,
                1 runs every trial in the calling process.

            seed (Optional[int]):
                Root seed. Trial i always gets the i-th child of
                SeedSequence(seed), so a fixed seed reproduces the exact
                trial sequence whatever the worker count.
                If None, randomness is uncontrolled.

            chunk_size (Optional[int]):
                Trials per submitted task.

            progress (bool): Show a tqdm progress bar.
        """
        if workers is not None and workers < 1:
            raise ValueError(f"workers must be >= 1, got {workers}")
        if chunk_size is not None and chunk_size < 1:
            raise ValueError(f"chunk_size must be >= 1, got {chunk_size}")

        self.workers = workers if workers is not None else default_workers()
        self.seed = seed
        self.chunk_size = chunk_size
        self.progress = progress

    def _chunk_size(self, trials: int) -> int:
        if self.chunk_size is not None:
            return self.chunk_size
        return max(1, -(-trials // (self.workers * CHUNKS_PER_WORKER)))

    def run(self, graph: Graph, trials: int) -> np.ndarray:
        """
        Runs `trials` trials and returns their cut sizes, index i holding the
        result of the i-th issued trial. The first failing trial aborts the
        whole batch and its error is re-raised.
        """
        if isinstance(trials, bool) or not isinstance(trials, Integral) or trials <= 0:
            raise InvalidTrialCount(f"number of trials must be a positive integer, got {trials!r}")

        # only the root entropy travels to the workers, trial seeds are derived there
        entropy = np.random.SeedSequence(self.seed).entropy
        results = np.empty(trials, dtype=np.int64)
        size = self._chunk_size(trials)
        chunks = [(start, min(size, trials - start)) for start in range(0, trials, size)]

        with tqdm(total=trials, desc="Contraction trials", disable=not self.progress) as pbar:
            if self.workers == 1:
                for start, count in chunks:
                    results[start:start + count] = _run_chunk(graph, entropy, start, count)
                    pbar.update(count)
                return results

            executor = concurrent.futures.ProcessPoolExecutor(
                max_workers=min(self.workers, len(chunks)),
                initializer=_init_worker,
                initargs=(graph,))
            try:
                futures = [executor.submit(_worker_chunk, entropy, start, count)
                           for start, count in chunks]
                for future in concurrent.futures.as_completed(futures):
                    start, cuts = future.result()
                    results[start:start + len(cuts)] = cuts
                    pbar.update(len(cuts))
            except BaseException:
                executor.shutdown(wait=True, cancel_futures=True)
                raise
            executor.shutdown(wait=True)

        return results

    def estimate(self, graph: Graph, trials: int) -> MinCutEstimate:
        summary = summarize(self.run(graph, trials))
        return MinCutEstimate(n=graph.n, m=graph.m,
                              minimum=summary.minimum, mean_gap=summary.mean_gap)


def estimate_min_cut(graph: Graph, trials: int, **runner_options) -> MinCutEstimate:
    """Shortcut for TrialRunner(**runner_options).estimate(graph, trials)."""
    return TrialRunner(**runner_options).estimate(graph, trials)
