#!/usr/bin/env python3

import os
import yaml
from svganimlib.core import errors
from svganimlib.exporters import css

#============================================

CONFIG_VERSION = 1

#============================================

class AnimationConfig():
	def __init__(self):
		self.config_file = None
		self.id_prefix = css.DEFAULT_ID_PREFIX
		self.animation_prefix = css.DEFAULT_ANIMATION_PREFIX
		self.precision = css.DEFAULT_PRECISION
		self.strict = False

	#============================
	def as_dict(self) -> dict:
		return {
			'css': {
				'id_prefix': self.id_prefix,
				'animation_prefix': self.animation_prefix,
				'precision': self.precision,
			},
			'script': {
				'strict': self.strict,
			},
		}

#============================================

class ConfigLoader():
	def __init__(self, config_file: str = None):
		self.config_file = config_file

	#============================
	def load(self) -> AnimationConfig:
		config = AnimationConfig()
		if self.config_file is None:
			return config
		config.config_file = self.config_file
		data = self._load_yaml()
		self._validate_version(data)
		self._parse_css(config, data.get('css', {}))
		self._parse_script(config, data.get('script', {}))
		return config

	#============================
	def _load_yaml(self) -> dict:
		if not os.path.isfile(self.config_file):
			raise errors.FileError(f"config file not found: {self.config_file}")
		file_size = os.path.getsize(self.config_file)
		if file_size > 10 ** 6:
			raise errors.ConfigError("config file is larger than 1MB")
		try:
			with open(self.config_file, 'r', encoding='utf-8') as data_file:
				data = yaml.safe_load(data_file)
		except OSError as error:
			raise errors.FileError(f"cannot read {self.config_file}: {error}") from error
		except yaml.YAMLError as error:
			raise errors.ConfigError(f"invalid yaml in {self.config_file}: {error}") from error
		if data is None:
			return {}
		if not isinstance(data, dict):
			raise errors.ConfigError("config must be a mapping at the top level")
		return data

	#============================
	def _validate_version(self, data: dict) -> None:
		version = data.get('svganim', CONFIG_VERSION)
		if version != CONFIG_VERSION:
			raise errors.ConfigError(f"svganim must be set to {CONFIG_VERSION}")
		known_keys = ('svganim', 'css', 'script')
		for key in data:
			if key not in known_keys:
				raise errors.ConfigError(f"unknown config key: {key}")

	#============================
	def _parse_css(self, config: AnimationConfig, section: dict) -> None:
		if not isinstance(section, dict):
			raise errors.ConfigError("css must be a mapping")
		id_prefix = section.get('id_prefix', config.id_prefix)
		if not isinstance(id_prefix, str):
			raise errors.ConfigError("css.id_prefix must be a string")
		animation_prefix = section.get('animation_prefix', config.animation_prefix)
		if not isinstance(animation_prefix, str) or animation_prefix == "":
			raise errors.ConfigError("css.animation_prefix must be a non-empty string")
		precision = section.get('precision', config.precision)
		if isinstance(precision, bool) or not isinstance(precision, int):
			raise errors.ConfigError("css.precision must be an integer")
		if precision < 0 or precision > 10:
			raise errors.ConfigError("css.precision must be between 0 and 10")
		config.id_prefix = id_prefix
		config.animation_prefix = animation_prefix
		config.precision = precision

	#============================
	def _parse_script(self, config: AnimationConfig, section: dict) -> None:
		if not isinstance(section, dict):
			raise errors.ConfigError("script must be a mapping")
		strict = section.get('strict', config.strict)
		if not isinstance(strict, bool):
			raise errors.ConfigError("script.strict must be true or false")
		config.strict = strict
