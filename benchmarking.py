import networkx as nx
import numpy as np
import pandas as pd
import time
import zlib
from tqdm import tqdm
from typing import List, Dict, Callable, Any, Optional


def networkx_reference(graph_matrix: np.ndarray) -> float:
    """
    Minimum cut value from networkx's Stoer-Wagner. networkx refuses
    disconnected graphs, whose minimum cut is 0.
    """
    G = nx.from_numpy_array(graph_matrix)
    if G.number_of_nodes() < 2 or not nx.is_connected(G):
        return 0
    true_value, _ = nx.stoer_wagner(G, weight='weight')
    return true_value


class BenchmarkRunner:
    """
    Handles running benchmarks for different graph models and algorithms.
    """

    def __init__(self,
                 algorithms: Dict[str, Callable],
                 generators: Dict[str, Callable],
                 seed: Optional[int] = None,
                 reference: Optional[Callable] = None):
        """
        Args:
            algorithms (Dict[str, Callable]):
                Dict of {'algo_name': algorithm_function}
                Each function must accept one arg: an (n, n) numpy matrix,
                and return the minimum cut value.

            generators (Dict[str, Callable]):
                Dict of {'model_name': generator_function}
                Each function must accept n, seed and **kwargs.

            seed (Optional[int]):
                Base seed for the per-trial graph seeds.
                If None, graphs are not reproducible.

            reference (Optional[Callable]):
                Computes the true cut value of a matrix. Defaults to
                networkx's Stoer-Wagner.
        """
        self.algorithms = algorithms
        self.generators = generators
        self.base_seed = seed
        self.reference = reference if reference is not None else networkx_reference

    def _trial_seed(self, model_name: str, n: int, trial: int) -> Optional[int]:
        if self.base_seed is None:
            return None
        # crc32 instead of hash() so seeds survive interpreter restarts
        key = f"{model_name}:{n}:{trial}".encode()
        return (self.base_seed + zlib.crc32(key)) % (2**32 - 1)

    def run(self,
            models: List[str],
            n_values: List[int],
            trials: int,
            model_params: Dict[str, Dict[str, Any]],
            progress: bool = True) -> pd.DataFrame:
        """
        Runs the full benchmark.

        Args:
            models (List[str]): List of model names (e.g., ['ER', 'BA']).
            n_values (List[int]): List of graph sizes (n).
            trials (int): Number of trials to run for each (model, n) pair.
            model_params (Dict): Parameters for each model generator.
                                 e.g., {'ER': {'p': 0.1}, 'BA': {'m': 3}}
            progress (bool): Show a tqdm bar over the trials.

        Returns:
            pd.DataFrame: A DataFrame with all results.
        """
        if trials < 1:
            raise ValueError("trials must be >= 1")
        all_results = []

        for model_name in models:
            if model_name not in self.generators:
                print(
                    f"Warning: Generator '{model_name}' not found. Skipping.")
                continue
            gen_func = self.generators[model_name]
            params = model_params.get(model_name, {})

            for n in n_values:
                print(
                    f"--- Running: Model={model_name}, n={n}, Trials={trials} ---")

                trial_results = {name: {'times': [], 'cuts': [], 'exact': 0}
                                 for name in self.algorithms}

                for i in tqdm(range(trials), desc=f"{model_name} n={n}",
                              disable=not progress):
                    graph = gen_func(
                        n=n, seed=self._trial_seed(model_name, n, i), **params)
                    true_value = self.reference(graph)

                    for algo_name, algo_func in self.algorithms.items():
                        graph_copy = np.copy(graph)

                        start_time = time.perf_counter()
                        cut_val = algo_func(graph_copy)
                        end_time = time.perf_counter()

                        data = trial_results[algo_name]
                        data['times'].append(end_time - start_time)
                        data['cuts'].append(cut_val)
                        if abs(cut_val - true_value) < 1e-9:
                            data['exact'] += 1

                for algo_name, data in trial_results.items():
                    all_results.append({
                        'model': model_name,
                        'n': n,
                        'algorithm': algo_name,
                        'trials': trials,
                        'mean_time_s': np.mean(data['times']),
                        'std_time_s': np.std(data['times']),
                        'mean_cut': np.mean(data['cuts']),
                        'min_found_cut': np.min(data['cuts']),
                        'max_found_cut': np.max(data['cuts']),
                        'exact_rate': data['exact'] / trials,
                    })

        print("--- Benchmark Complete ---")
        return pd.DataFrame(all_results)
