from prometheus_client import Counter, Histogram

METRIC_PREFIX = 'linguaflow_'

attempt_metrics_label_names = ['awaiting_review']
ATTEMPT_METRICS = {
    'submitted': Counter(
        METRIC_PREFIX + 'lesson_attempts_total',
        'Total number of submitted lesson attempts',
        labelnames=attempt_metrics_label_names,
    ),
    'score': Histogram(
        METRIC_PREFIX + 'lesson_attempt_score',
        'Aggregated score of submitted lesson attempts',
        labelnames=attempt_metrics_label_names,
        buckets=(10, 20, 30, 40, 50, 60, 70, 80, 90, 100),
    ),
    'exercises_graded': Counter(
        METRIC_PREFIX + 'exercises_graded_total',
        'Total number of auto-graded exercise answers',
        labelnames=['kind', 'is_correct'],
    ),
    'manual_grades': Counter(
        METRIC_PREFIX + 'manual_grades_total',
        'Total number of text answers graded by tutors',
    ),
}

ASSIGNMENT_METRICS = {
    'orphaned_seen': Counter(
        METRIC_PREFIX + 'orphaned_assignments_seen_total',
        'Assignments rendered with placeholder lesson data',
    ),
    'tutor_missing_seen': Counter(
        METRIC_PREFIX + 'assignments_tutor_missing_total',
        'Assignments rendered with placeholder tutor data',
    ),
    'orphaned_removed': Counter(
        METRIC_PREFIX + 'orphaned_assignments_removed_total',
        'Orphaned assignments deleted by explicit cleanup',
    ),
}
