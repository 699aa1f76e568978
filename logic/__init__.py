"""logic — Game systems package.

Top-level modules
-----------------
tick            — per-frame system orchestrator
movement        — bee kinematics + swept wall resolution
collision       — collision-shape sync + bee/enemy overlap
spawners        — spawner cooldown timers → SpawnEnemy events
enemies         — enemy materialisation, homing and expiry
entity_factory  — level → wall / spawner / bee entities
"""
