"""
Level module - level state machines, target strategies and the level manager

Import from the submodules directly; the registry of playable levels lives
in learnvim.level.manager.
"""
