"""
Result builder for JSON and web output.
"""

from ..formatters import calculate_parallelism_factor, top_entries


def prepare_results(analyzer):
    """
    Convert analyzer results to a structured format for JSON/HTML output.

    Args:
        analyzer: WctrAnalyzer instance with completed analysis

    Returns:
        Dictionary with structured results for rendering
    """
    summary = analyzer.summary

    # Section 1: Ranked tasks
    tasks = []
    for rank, attribution in enumerate(analyzer.top_results(), start=1):
        wall_clock_ms = analyzer.intervals[attribution.task].duration_ms
        tasks.append({
            'rank': rank,
            'task': attribution.task,
            'wctr_ms': attribution.wctr_ms,
            'wctr_formatted': analyzer.format_time(attribution.wctr_ms),
            'wall_clock_ms': wall_clock_ms,
            'wall_clock_formatted': analyzer.format_time(wall_clock_ms),
            'parallelism': round(calculate_parallelism_factor(wall_clock_ms, attribution.wctr_ms), 2)
        })

    # Section 2: Time by output type
    by_extension = []
    for output_type, stats in top_entries(analyzer.extension_breakdown, analyzer.config.num_lines):
        by_extension.append({
            'type': output_type,
            'count': stats['count'],
            'wctr_ms': stats['wctr_ms'],
            'wctr_formatted': analyzer.format_time(stats['wctr_ms']),
            'cpu_ms': stats['cpu_ms'],
            'cpu_formatted': analyzer.format_time(stats['cpu_ms']),
        })

    # Section 3: Build totals
    summary_data = {
        'task_count': summary.task_count,
        'shown_count': len(tasks),
        'span_ms': summary.span_ms,
        'span_formatted': analyzer.format_time(summary.span_ms),
        'covered_ms': summary.covered_ms,
        'covered_formatted': analyzer.format_time(summary.covered_ms),
        'cpu_ms': summary.cpu_ms,
        'cpu_formatted': analyzer.format_time(summary.cpu_ms),
        'total_wctr_ms': summary.total_wctr_ms,
        'total_wctr_formatted': analyzer.format_time(summary.total_wctr_ms),
        'parallelism': round(summary.parallelism, 2),
    }

    return {
        'summary': summary_data,
        'tasks': tasks,
        'by_extension': by_extension,
    }
