# main.py
"""
Main entry point for the smoke canvas demo.

This script orchestrates the demo lifecycle:
1. Loads configuration from `config.json`.
2. Initializes the logging system.
3. Opens the window and sets up the house scene and smoke emitter.
4. Runs the render loop, one smoke tick per frame.
5. Handles clean shutdown.
"""
import logging
from utils import setup_logging, load_config
import cProfile
import pstats
import io

def main():
    """
    The main function to run the demo.
    """
    # Logging is not set up yet, so we use a print for this one error.
    try:
        config = load_config('config.json')
    except Exception as e:
        print(f"FATAL: Could not load config.json. Error: {e}")
        return

    setup_logging(config)

    logging.info("--- Smoke Canvas Starting ---")

    run_params = config.get('run_control', {})
    vis_params = config.get('visualization', {})
    house = config.get('house', {})
    smoke_params = config.get('smoke', {})

    from visualization import Visualizer

    visualizer = Visualizer(vis_params, house, smoke_params)

    profiler = cProfile.Profile()

    log_throttle = run_params.get('log_throttle_steps', 100)
    max_steps = run_params.get('max_steps', 3000)

    running = True
    step_num = 0

    profiler.enable()
    while running:
        if not visualizer.draw():
            running = False
        step_num += 1

        if step_num % log_throttle == 0:
            pool = visualizer.emitter.pool
            logging.info(f"Frame {step_num}/{max_steps}")
            logging.debug(
                f"Frame {step_num} | Live particles: {pool.live_count} | "
                f"Pool capacity: {pool.capacity}"
            )

        if step_num >= max_steps:
            logging.info(f"Reached max_steps ({max_steps}). Stopping demo.")
            running = False
    profiler.disable()

    visualizer.close()
    logging.info("Render loop finished.")

    logging.info("--- Performance Profile ---")
    s = io.StringIO()
    stats = pstats.Stats(profiler, stream=s).sort_stats('cumtime')
    stats.print_stats(20)
    logging.info(f"\n{s.getvalue()}")

    logging.info("--- Smoke Canvas Shutting Down ---")


if __name__ == "__main__":
    main()
