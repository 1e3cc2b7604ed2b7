"""Sampling modes - decide which surface point the picker reads."""

from enum import Enum

from constants import SAMPLING_AT_POINTER, SAMPLING_AT_CENTER


class SamplingPolicy(Enum):
	"""Where a sample is taken after each gesture step."""
	AT_POINTER = SAMPLING_AT_POINTER
	AT_CENTER = SAMPLING_AT_CENTER


class SamplingMode:
	"""Base class for sampling modes."""

	policy = None

	def sample_point(self, pointer_x, pointer_y, transform):
		"""Return the (x, y) surface point to sample.

		Args:
			pointer_x, pointer_y: Current pointer position (widget pixels)
			transform: HandleTransform after the gesture step was applied
		"""
		raise NotImplementedError


class PointerSamplingMode(SamplingMode):
	"""Sample exactly under the pointer."""

	policy = SamplingPolicy.AT_POINTER

	def sample_point(self, pointer_x, pointer_y, transform):
		return pointer_x, pointer_y


class CenterSamplingMode(SamplingMode):
	"""Sample at the handle's geometric center."""

	policy = SamplingPolicy.AT_CENTER

	def sample_point(self, pointer_x, pointer_y, transform):
		center = transform.center()
		return center.x, center.y


def create_sampling_mode(policy):
	"""Factory for sampling modes.

	Args:
		policy: SamplingPolicy or its string value ('at_pointer', 'at_center')

	Returns:
		SamplingMode instance
	"""
	if not isinstance(policy, SamplingPolicy):
		policy = SamplingPolicy(str(policy).lower())

	modes = {
		SamplingPolicy.AT_POINTER: PointerSamplingMode,
		SamplingPolicy.AT_CENTER: CenterSamplingMode,
	}
	return modes[policy]()
