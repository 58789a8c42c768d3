# cpugol

A deliberately simple Conway's Game of Life. The board is computed cell by
cell on the CPU and drawn in a pygame window. Every frame is timed (input
handling, update, draw), and a summary of the run is written to standard
error when the simulation ends.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Running

```
cpugol
```

By default an 800x600 window opens with 4x4-pixel cells, and the board starts
as a checkerboard. The simulation stops after 512 frames, or earlier if you
press Escape, press Ctrl+C while the window has focus, or close the window.

Options:

- `--frames N`: the most frames to run (default 512)
- `--scale N`: cell size in pixels (default 4)
- `--width N`, `--height N`: window size in pixels (default 800x600)

The window width and height must both be multiples of the cell size.
Otherwise `Board.from_window` raises `ValueError`.

At start-up the program prints a short header: the program name, a
description, the abbreviated git commit of the current directory (if git is
available), the window size, the board size and the cell size. When the run
ends it prints:

- the frame count, total run time, final population and number of generations;
- the average time per frame spent on input, update and draw, with each one's
  share of the frame time;
- the average frame time and frames per second, next to the same figures
  averaged over the whole run.

The per-frame averages cover only the most recent frames. They are kept in
ring buffers of capacity 4.

## Using it as a library

```python
from cpugol.board import Board, CellState

board = Board(10, 10)
board.set(1, 0, CellState.ALIVE)
board.set(1, 1, CellState.ALIVE)
board.set(1, 2, CellState.ALIVE)
board.step()
print(sorted(board.alive_cells()), board.population, board.generation)
```

- `cpugol.board.Board`: a grid of `CellState.DEAD` / `CellState.ALIVE` cells.
  - `get` and `set` raise `IndexError` outside the board.
  - `set` keeps `population` up to date.
  - `population_count(x, y)` counts the live cells in the 3x3 block around a
    cell, including the cell itself.
  - `step()` applies the rules in place and in row order, so a cell that has
    already been updated affects the cells after it. It increments
    `generation`.
  - `seed_checkerboard()` brings every other cell to life.
  - `alive_cells()` yields the coordinates of the live cells.
- `cpugol.ring_buffer.RingBuffer`: a fixed-capacity buffer of floats that
  overwrites its oldest slot.
  - It provides `put`, `get`, `average`, `is_full`, `dump` and `len()`.
- `cpugol.metrics.FrameMetrics`: keeps one ring buffer each for input, update
  and draw times, frame time and FPS.
  - `update()` records one frame.
  - `averages()` returns the current means.
  - `report()` formats the end-of-run summary.
- `cpugol.app`: the window and main loop.
  - `run()` starts a simulation and returns the summary text.
  - `main()` is the `cpugol` command.
- `cpugol.log`: small helpers for writing coloured messages to standard
  error, plus `get_commit_hash()`.

## What it does not do

The package has no way to edit cells with the mouse. It cannot load or save
patterns, and it does not wrap the board around at the edges. Rendering and
computation both run on the CPU only.