"""
Strand Growth Script

Grows a strand drawing on a Cairo surface and saves the result.

Configuration is loaded from a JSON file of host options (camelCase keys,
see config/strand_config.py); missing keys keep their defaults.

Modes:
    offline  - Simulated clock, runs faster than real time and captures an
               animation frame every 1000/fps ms
    realtime - asyncio event loop for --duration seconds, saves the last frame
"""

import argparse
import asyncio
from pathlib import Path

from tqdm import tqdm

from config import load_config, SurfaceConfig
from rendering import CairoSurface, save_frame, save_animation
from strands import Session, SimulatedScheduler, AsyncioScheduler, plot_growth_statistics


def run_offline(session: Session, surface: CairoSurface, scheduler: SimulatedScheduler,
                config, duration_ms: float, fps: int):
    frame_ms = 1000 / fps
    n_frames = max(1, int(duration_ms / frame_ms))

    engine = session.start(config)
    frames = []
    for _ in tqdm(range(n_frames), desc="Growing strands"):
        scheduler.advance(frame_ms)
        frames.append(surface.to_rgb())
        if engine is not None and engine.idle and not config.fade_out:
            break
    return engine, frames


async def run_realtime(session: Session, surface: CairoSurface, config,
                       duration_s: float, output_path: str):
    session.scheduler = AsyncioScheduler()
    engine = session.start(config)
    await asyncio.sleep(duration_s)
    save_frame(surface.to_rgb(), output_path)
    print(f"  Saved frame: {output_path}")
    session.stop()
    return engine


def main():
    parser = argparse.ArgumentParser(description="Grow a strand drawing and save it.")
    parser.add_argument('--config', type=str, default='config/strands.json',
                        help='JSON file with generator options')
    parser.add_argument('--mode', type=str, default='offline', choices=['offline', 'realtime'])
    parser.add_argument('--width', type=int, default=800, help='Viewport width')
    parser.add_argument('--height', type=int, default=600, help='Viewport height')
    parser.add_argument('--duration', type=float, default=20.0, help='Seconds to grow')
    parser.add_argument('--fps', type=int, default=20)
    parser.add_argument('--output', type=str, default='outputs/strands/strands.gif')
    parser.add_argument('--stats', type=str, default=None, help='Save growth statistics plot here')
    args = parser.parse_args()

    config = load_config(args.config)
    surface = CairoSurface(SurfaceConfig(output_width=args.width, output_height=args.height))
    scheduler = SimulatedScheduler()
    session = Session(surface, scheduler, viewport=lambda: (args.width, args.height))

    print(f"Growing strands on {args.width}x{args.height} for {args.duration}s ({args.mode})")
    print(f"  Loss per step: {config.loss_quantity}")
    print(f"  Exception probability: {config.exception_prob}")
    print()

    if args.mode == 'offline':
        engine, frames = run_offline(session, surface, scheduler, config, args.duration * 1000, args.fps)
        if Path(args.output).suffix.lower() in ('.gif', '.mp4'):
            save_animation(frames, args.output, fps=args.fps)
        else:
            save_frame(frames[-1], args.output)
    else:
        engine = asyncio.run(run_realtime(session, surface, config, args.duration, args.output))

    if engine is not None:
        stats = engine.stats
        print(f"\nGrew {stats.strands_started} strands ({stats.spawns} spawns) in {stats.steps} steps")
        if args.stats:
            plot_growth_statistics(stats, save_path=args.stats)

    if session.running:
        session.stop()


if __name__ == '__main__':
    main()
