#!/usr/bin/env python3

import types
from dataclasses import dataclass
from svganimlib.core import errors
from svganimlib.core import script

#============================================

STEP_UNIT_MS = 1000.0
FINAL_STAGE = 100.0

#============================================

@dataclass(frozen=True)
class Keyframe():
	stage: float
	opacity: float

#============================================

@dataclass(frozen=True)
class Timeline():
	keyframes: types.MappingProxyType
	total_duration_ms: int
	step_percent: float
	clamped_count: int = 0

	#============================
	def object_ids(self) -> list:
		return list(self.keyframes.keys())

	#============================
	def as_plan(self) -> dict:
		objects = {}
		for object_id, frames in self.keyframes.items():
			objects[object_id] = [[frame.stage, frame.opacity] for frame in frames]
		return {
			'total_duration_ms': self.total_duration_ms,
			'step_percent': self.step_percent,
			'clamped_keyframes': self.clamped_count,
			'objects': objects,
		}

#============================================

class TimelineCompiler():
	"""
	Compile show/hide/wait instructions into per-object opacity keyframes.

	Stages are percentages of the whole animation. Each wait moves a shared
	cursor forward; a show or hide ramps the object's opacity between the
	cursor and one step past it, where a step is the share of the timeline
	covered by STEP_UNIT_MS.
	"""
	def __init__(self, instructions: list):
		self.instructions = list(instructions)
		self.total_duration_ms = 0
		self.step = 0.0
		self.current_stage = 0.0
		self.next_stage = 0.0
		self.clamped_count = 0
		self._frames = {}

	#============================
	def compile(self) -> Timeline:
		self.total_duration_ms = self._sum_waits()
		if self.total_duration_ms == 0:
			raise errors.EmptyTimelineError(
				"total wait duration is zero, add at least one positive wait"
			)
		self.step = STEP_UNIT_MS / self.total_duration_ms * 100.0
		self.current_stage = 0.0
		self.next_stage = self.current_stage + self.step
		self.clamped_count = 0
		self._frames = {}
		for instruction in self.instructions:
			self._apply(instruction)
		for object_id, frames in self._frames.items():
			self._append(object_id, FINAL_STAGE, frames[-1].opacity)
		keyframes = {
			object_id: tuple(frames) for object_id, frames in self._frames.items()
		}
		return Timeline(
			keyframes=types.MappingProxyType(keyframes),
			total_duration_ms=self.total_duration_ms,
			step_percent=self.step,
			clamped_count=self.clamped_count,
		)

	#============================
	def _sum_waits(self) -> int:
		total = 0
		for instruction in self.instructions:
			if instruction.kind == script.WAIT:
				total += instruction.duration_ms
		return total

	#============================
	def _apply(self, instruction: script.Instruction) -> None:
		kind = instruction.kind
		if kind == script.WAIT:
			self.current_stage += instruction.duration_ms / STEP_UNIT_MS * self.step
			self.next_stage = self.current_stage + self.step
			return
		if kind not in (script.SHOW, script.HIDE):
			raise RuntimeError(f"unsupported instruction kind: {kind}")
		object_id = instruction.object_id
		if object_id not in self._frames:
			self._frames[object_id] = [Keyframe(0.0, 0.0)]
		if kind == script.SHOW:
			self._append(object_id, self.current_stage, 0.0)
			self._append(object_id, self.next_stage, 1.0)
			return
		self._append(object_id, self.current_stage, 1.0)
		self._append(object_id, self.next_stage, 0.0)

	#============================
	def _append(self, object_id: str, stage: float, opacity: float) -> None:
		frames = self._frames[object_id]
		# keep each object's stages inside [previous stage, 100]
		clamped = min(max(stage, frames[-1].stage), FINAL_STAGE)
		if clamped != stage:
			self.clamped_count += 1
		frames.append(Keyframe(clamped, opacity))

#============================================

def compile_timeline(instructions: list) -> Timeline:
	return TimelineCompiler(instructions).compile()
