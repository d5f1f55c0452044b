import matplotlib.pyplot as plt


def plot_score_distribution(analyzer, figsize=(14, 5)):
    """Bucket histogram and density curve of the accumulated scores side by side"""
    distribution = analyzer.get_distribution()
    curve = analyzer.class_density()
    class_summary = analyzer.get_summary().class_summary

    fig, (ax1, ax2) = plt.subplots(1, 2, figsize=figsize)
    title = analyzer.subject_name() or 'Score Distribution'
    fig.suptitle(title, fontsize=16, fontweight='bold')

    # Plot 1: Adaptive buckets
    labels = [b.range_label for b in distribution]
    counts = [b.count for b in distribution]
    colors = ['red' if b.is_failing else 'green' for b in distribution]
    bars = ax1.bar(labels, counts, color=colors, alpha=0.7, edgecolor='black')
    for rect, b in zip(bars, distribution):
        ax1.annotate(f'{b.percent_of_class:.1f}%',
                     xy=(rect.get_x() + rect.get_width() / 2, rect.get_height()),
                     ha='center', va='bottom', fontsize=9)
    ax1.set_xlabel('Score Range')
    ax1.set_ylabel('Students')
    ax1.set_title('Students per Range')
    ax1.grid(True, axis='y', alpha=0.3)

    # Plot 2: Density curve
    if not curve.is_empty:
        ax2.plot(curve.x, curve.y, 'b-', linewidth=2, label='Density')
        ax2.fill_between(curve.x, curve.y, alpha=0.2)
        ax2.axvline(class_summary.overall_average, color='green', linestyle='--', linewidth=2,
                    label=f'Average: {class_summary.overall_average:.2f}')
        ax2.axvline(analyzer.passing_threshold, color='red', linestyle=':', linewidth=2,
                    label=f'Passing: {analyzer.passing_threshold:g}')
        ax2.legend()
    else:
        ax2.text(0.5, 0.5, 'No scores', transform=ax2.transAxes, ha='center', va='center')
    ax2.set_xlabel('Score')
    ax2.set_ylabel('Density')
    ax2.set_title('Score Density')
    ax2.grid(True, alpha=0.3)

    plt.tight_layout()
    return fig


def plot_evaluation_performance(analyzer, figsize=(12, 6)):
    """Box plot per evaluation on a common percentage scale, with means marked"""
    performance = [row for row in analyzer.evaluation_performance() if row['values']]

    fig, ax = plt.subplots(figsize=figsize)

    if performance:
        positions = list(range(1, len(performance) + 1))
        ax.boxplot([row['values'] for row in performance], positions=positions,
                   showmeans=True, patch_artist=True,
                   boxprops=dict(facecolor='skyblue', alpha=0.7))
        ax.set_xticks(positions)
        ax.set_xticklabels([row['name'] for row in performance], rotation=30, ha='right')
    else:
        ax.text(0.5, 0.5, 'No scores', transform=ax.transAxes, ha='center', va='center')

    ax.set_xlabel('Evaluation')
    ax.set_ylabel('Score (% of evaluation maximum)')
    ax.set_title('Performance by Evaluation', fontsize=15, fontweight='bold')
    ax.grid(True, axis='y', alpha=0.3)

    plt.tight_layout()
    return fig
