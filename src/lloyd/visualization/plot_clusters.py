"""
Cluster visualization utilities.

Plots 2D clustering results and the snapshots handed to progress callbacks.
"""

from typing import Optional, List
import torch
from torch import Tensor
import matplotlib.pyplot as plt

from ..base.data_structures import IterationRecord
from ..exceptions import DimensionMismatch


def plot_clusters_2d(X: Tensor,
                     labels: Tensor,
                     centers: Optional[Tensor] = None,
                     n_clusters: Optional[int] = None,
                     ax: Optional[plt.Axes] = None,
                     colors: Optional[List] = None,
                     alpha: float = 0.7,
                     center_marker: str = 'X',
                     center_size: int = 200,
                     point_size: int = 50,
                     show_legend: bool = True,
                     title: Optional[str] = None) -> plt.Axes:
    """Plot 2D clustering results.

    Args:
        X: (n, 2) data points
        labels: (n,) cluster labels
        centers: Optional (k, 2) cluster centroids
        n_clusters: Number of clusters (inferred from labels/centers if None)
        ax: Matplotlib axes (created if None)
        colors: List of colors for clusters
        alpha: Point transparency
        center_marker: Marker for centroids
        center_size: Size of centroid markers
        point_size: Size of data points
        show_legend: Whether to show legend
        title: Plot title

    Returns:
        Matplotlib axes
    """
    X_np = torch.as_tensor(X).detach().cpu().numpy()
    labels_np = torch.as_tensor(labels).detach().cpu().numpy()
    if X_np.ndim != 2 or X_np.shape[1] != 2:
        raise DimensionMismatch(f"plot_clusters_2d needs (n, 2) data, got shape {X_np.shape}")

    if ax is None:
        fig, ax = plt.subplots(figsize=(8, 6))

    if n_clusters is None:
        if centers is not None:
            n_clusters = len(centers)
        else:
            n_clusters = int(labels_np.max()) + 1 if labels_np.size else 0

    if colors is None:
        cmap = plt.get_cmap('tab10' if n_clusters <= 10 else 'tab20')
        colors = [cmap(i % cmap.N) for i in range(max(n_clusters, 1))]

    for k in range(n_clusters):
        mask = labels_np == k
        if not mask.any():
            continue
        ax.scatter(X_np[mask, 0], X_np[mask, 1],
                   color=colors[k % len(colors)],
                   s=point_size,
                   alpha=alpha,
                   edgecolors='black',
                   linewidth=0.5,
                   label=f'Cluster {k}')

    if centers is not None:
        centers_np = torch.as_tensor(centers).detach().cpu().numpy()
        ax.scatter(centers_np[:, 0], centers_np[:, 1],
                   c='black',
                   marker=center_marker,
                   s=center_size,
                   edgecolors='white',
                   linewidth=2,
                   label='Centroids',
                   zorder=10)

    ax.set_xlabel('Feature 1')
    ax.set_ylabel('Feature 2')

    if title:
        ax.set_title(title)

    if show_legend:
        ax.legend()

    return ax


def plot_iteration(record: IterationRecord,
                   ax: Optional[plt.Axes] = None,
                   **kwargs) -> plt.Axes:
    """Plot a progress-callback snapshot.

    Intended for use inside an ``iteration_callback``::

        def callback(record):
            plot_iteration(record)
            plt.savefig(f"iter_{record.iteration:04d}.png")
            plt.close()

    Args:
        record: Snapshot passed to the iteration callback
        ax: Matplotlib axes (created if None)
        **kwargs: Forwarded to plot_clusters_2d

    Returns:
        Matplotlib axes
    """
    clusters = record.clusters
    members = [clusters[k] for k in clusters]
    points = torch.cat(members, dim=0)
    labels = torch.cat([
        torch.full((m.shape[0],), k, dtype=torch.long)
        for k, m in zip(clusters, members)
    ])

    state = "complete" if record.clustering_complete else "running"
    kwargs.setdefault('title', f"Iteration {record.iteration} ({state})")

    return plot_clusters_2d(points, labels,
                            centers=record.centroids,
                            n_clusters=len(clusters),
                            ax=ax,
                            **kwargs)
