"""Bakes a small in-memory scene: two clips of a three joint skeleton and one property track."""

import numpy as np

from animsampler import log
from animsampler.animation import extract_animations, extract_sampling_info, extract_track
from animsampler.geombase import GeneralPose3
from animsampler.scene import MemoryScene, TimeMode, TimeSpan, ValueKind
from animsampler.skeleton import Bone, SkeletonData

log.set_level("DEBUG")
log.set_callback(lambda level, message: print(f"[{level.name}] {message}"))

scene = MemoryScene(time_mode=TimeMode.FRAMES30)
scene.add_node("Hips", pose=GeneralPose3.translation(0.0, 1.0, 0.0))
spine = scene.add_node("Spine", parent="Hips", pose=GeneralPose3.translation(0.0, 0.5, 0.0))
spine.add_property("Glow", ValueKind.DOUBLE, 0.0, keys=[(0.0, 0.0), (1.0, 1.0)])

walk = scene.add_clip("Walk", TimeSpan(0.0, 1.0))
walk.add_channel("Hips", [
    (0.0, GeneralPose3.translation(0.0, 1.0, 0.0)),
    (1.0, GeneralPose3.translation(2.0, 1.0, 0.0)),
])
scene.add_clip("Idle", TimeSpan(0.0, 0.0))

skeleton = SkeletonData([
    Bone("Hips", 0),
    Bone("Spine", 1, parent_index=0),
    Bone("Head", 2, parent_index=1, bind_translation=[0.0, 0.3, 0.0]),
])

animations = extract_animations(scene, skeleton, sampling_rate=4.0)
for animation in animations:
    print(f"Animation {animation.name}: duration {animation.duration}s")
    for bone, track in zip(skeleton.bones, animation.tracks):
        print(f"  {bone.name}: {len(track.translations)} keys, last translation {track.translations.values[-1]}")

info = extract_sampling_info(scene, walk, 4.0)
track = extract_track(scene, info, "Spine", "Glow", clip=walk)
print(f"Track {track.name}: ratios {track.ratios.tolist()}")
print(f"  values {np.round(track.values[:, 0], 3).tolist()}")
