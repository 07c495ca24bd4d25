"""
K-means clustering in raw RGB space
Collapses color samples into k representative centroids
"""

import logging
from typing import List

import numpy as np

from .pixels import RGBColor

DEFAULT_MAX_ITERATIONS = 300


def _squared_distances(samples: np.ndarray, centroids: np.ndarray) -> np.ndarray:
    """(N, k) squared Euclidean distances"""
    diff = samples[:, None, :] - centroids[None, :, :]
    return np.einsum('nkc,nkc->nk', diff, diff)


def initial_centroids(samples: np.ndarray, k: int) -> np.ndarray:
    """
    Farthest-point seeding, fully deterministic.

    Starts from the first sample, then repeatedly adds the sample farthest
    from its nearest chosen centroid (lowest index on ties).
    """
    centroids = [samples[0]]
    nearest = ((samples - samples[0]) ** 2).sum(axis=1)

    while len(centroids) < k:
        index = int(np.argmax(nearest))
        centroids.append(samples[index])
        nearest = np.minimum(nearest, ((samples - samples[index]) ** 2).sum(axis=1))

    return np.array(centroids, dtype=np.float64)


def assign_clusters(samples: np.ndarray, centroids: np.ndarray) -> np.ndarray:
    """Index of the nearest centroid per sample, lowest index on ties"""
    return np.argmin(_squared_distances(samples, centroids), axis=1)


def update_centroids(samples: np.ndarray, assignments: np.ndarray, centroids: np.ndarray) -> np.ndarray:
    """Per-cluster means; clusters without samples keep their centroid"""
    k = len(centroids)
    counts = np.bincount(assignments, minlength=k)
    sums = np.zeros_like(centroids)
    np.add.at(sums, assignments, samples)

    updated = centroids.copy()
    populated = counts > 0
    updated[populated] = sums[populated] / counts[populated, None]
    return updated


def kmeans(k: int, samples, convergence_threshold: float,
           max_iterations: int = DEFAULT_MAX_ITERATIONS) -> List[RGBColor]:
    """
    Cluster RGB samples into `k` centroids.

    Iterates assignment and mean update until the summed centroid movement
    is at most `convergence_threshold`, or `max_iterations` rounds have run.
    Centroids are returned in seeding order, truncated to integer channels.
    """
    if k < 1:
        raise ValueError(f"k must be positive, got {k}")

    points = np.asarray(samples, dtype=np.float64).reshape(-1, 3)
    if len(points) == 0:
        raise ValueError("Cannot cluster an empty sample set")

    centroids = initial_centroids(points, k)

    for iteration in range(1, max_iterations + 1):
        assignments = assign_clusters(points, centroids)
        updated = update_centroids(points, assignments, centroids)

        movement = float(np.sqrt(((updated - centroids) ** 2).sum(axis=1)).sum())
        centroids = updated

        if movement <= convergence_threshold:
            logging.debug(f"K-means converged after {iteration} iterations (movement {movement:.3f})")
            break
    else:
        logging.debug(f"K-means stopped at {max_iterations} iterations without converging")

    return [RGBColor.from_array(c) for c in np.clip(np.floor(centroids), 0, 255).astype(int)]
