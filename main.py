"""
Main Execution Script for the Penguin Species Classification Pipeline

Runs the complete workflow on a tabular file of penguin measurements:

1. Configuration: CLI arguments or a YAML recipe, validated by Pydantic.
2. Loading: Reads the CSV, checks the schema and refuses missing values
   unless dropping them was explicitly requested.
3. Exploration: Logs per-class summary statistics and saves box plots.
4. Splitting: Seeded 70/30 train/test partition (no stratification).
5. Training: Fits the configured classifier (random forest by default) on
   `species ~ .` with a seeded algorithm.
6. Evaluation: Predicts the testing subset, builds the confusion matrix,
   derives accuracy, sensitivity and PPV, and writes figures and reports.

Usage:
    python main.py --data_path penguins.csv
    python main.py --data_path penguins.csv --model_name logistic_regression
    python main.py --config recipes/penguins.yaml
"""

# =========================================================================== #
#                                Internal Imports                             #
# =========================================================================== #
from rookery.core import (
    Config,
    LogStyle,
    RootOrchestrator,
    log_pipeline_summary,
    parse_args,
)
from rookery.pipeline import run_training_phase

# =========================================================================== #
#                               MAIN EXECUTION
# =========================================================================== #

def main(argv=None) -> None:
    """
    The main function that controls the entire training and evaluation flow.
    """
    args = parse_args(argv)
    cfg = Config.from_args(args)

    with RootOrchestrator(cfg) as orchestrator:
        run_logger = orchestrator.run_logger
        paths = orchestrator.paths

        try:
            result = run_training_phase(orchestrator)

        except KeyboardInterrupt:
            run_logger.warning(f"{LogStyle.WARNING} Interrupted by user.")
            raise SystemExit(1)

        orchestrator.time_tracker.stop()
        log_pipeline_summary(
            test_acc=result.test_accuracy,
            run_dir=paths.root,
            duration=orchestrator.time_tracker.elapsed_formatted,
            report_path=result.report_path,
            logger_instance=run_logger,
        )


# =========================================================================== #
#                               ENTRY POINT
# =========================================================================== #

if __name__ == "__main__":
    main()
