"""Weighted k-means colour quantization in L*a*b* space."""

from __future__ import annotations

import random
from collections import Counter
from collections.abc import Iterable, Sequence
from operator import itemgetter

from matcolors.point_provider_lab import argb_from_lab, lab_distance, lab_from_argb
from matcolors.quantizer_map import QuantizerResult

_MAX_ITERATIONS = 10
_SEED = 0x42688


def quantize_wsmeans(
    input_pixels: Iterable[int],
    max_colors: int,
    starting_clusters: Sequence[int] = (),
) -> QuantizerResult:
    """Cluster ARGB pixels into at most ``max_colors`` colours with k-means.

    ``starting_clusters`` seeds the centroids (typically the output of Wu);
    any further centroids needed are picked from distinct input pixels.
    """
    pixel_to_count = Counter(input_pixels)
    pixels = list(pixel_to_count)
    counts = [pixel_to_count[pixel] for pixel in pixels]
    points = [lab_from_argb(pixel) for pixel in pixels]

    if max_colors < 1 and points:
        raise ValueError("max_colors must be at least 1")
    cluster_count = max(0, min(max_colors, len(points)))

    clusters = [lab_from_argb(cluster) for cluster in starting_clusters]
    additional_needed = cluster_count - len(clusters)
    if additional_needed < 0:
        raise ValueError(
            f"{len(clusters)} starting clusters exceed the {cluster_count} clusters available"
        )

    if additional_needed > 0:
        # Seed with real pixels rather than random centroids, which tend to end up empty.
        generator = random.Random(_SEED)
        chosen: list[int] = []
        for _ in range(additional_needed):
            index = generator.randrange(len(points))
            while index in chosen:
                index = generator.randrange(len(points))
            chosen.append(index)
        clusters.extend(points[index] for index in chosen)

    cluster_indices = [index % cluster_count for index in range(len(points))]
    distance_matrix = [[[0.0, j] for j in range(cluster_count)] for _ in range(cluster_count)]
    pixel_count_sums = [0] * cluster_count

    for iteration in range(_MAX_ITERATIONS):
        for i in range(cluster_count):
            for j in range(i + 1, cluster_count):
                distance = lab_distance(clusters[i], clusters[j])
                distance_matrix[j][i] = [distance, i]
                distance_matrix[i][j] = [distance, j]
            distance_matrix[i].sort(key=itemgetter(0))

        points_moved = 0
        for point_index, point in enumerate(points):
            previous_index = cluster_indices[point_index]
            previous_distance = lab_distance(point, clusters[previous_index])
            row = distance_matrix[previous_index]

            minimum_distance = previous_distance
            new_index = None
            for j, cluster in enumerate(clusters):
                if row[j][0] >= 4.0 * previous_distance:
                    continue
                distance = lab_distance(point, cluster)
                if distance < minimum_distance:
                    minimum_distance = distance
                    new_index = j

            if new_index is not None:
                points_moved += 1
                cluster_indices[point_index] = new_index

        if points_moved == 0 and iteration > 0:
            break

        sums_l = [0.0] * cluster_count
        sums_a = [0.0] * cluster_count
        sums_b = [0.0] * cluster_count
        pixel_count_sums = [0] * cluster_count
        for cluster_index, (l, a, b), count in zip(cluster_indices, points, counts):
            pixel_count_sums[cluster_index] += count
            sums_l[cluster_index] += l * count
            sums_a[cluster_index] += a * count
            sums_b[cluster_index] += b * count

        clusters = [
            (l / count, a / count, b / count) if count else (0.0, 0.0, 0.0)
            for l, a, b, count in zip(sums_l, sums_a, sums_b, pixel_count_sums)
        ]

    color_to_count: dict[int, int] = {}
    for count, cluster in zip(pixel_count_sums, clusters):
        if count == 0:
            continue
        argb = argb_from_lab(*cluster)
        if argb in color_to_count:
            continue
        color_to_count[argb] = count

    input_pixel_to_cluster_pixel = {
        pixel: argb_from_lab(*clusters[cluster_index])
        for pixel, cluster_index in zip(pixels, cluster_indices)
    }

    return QuantizerResult(
        color_to_count=color_to_count,
        input_pixel_to_cluster_pixel=input_pixel_to_cluster_pixel,
    )