"""
Flappy - a single-screen arcade game.

The simulation (physics_engine, pipe_spawner, physics_core) is plain Python;
flappy_client wires it to a pygame window.
"""
