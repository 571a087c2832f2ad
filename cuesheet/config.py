import configparser
import os

CONFIG_FILE_PATH = os.path.expanduser("~/.cuesheet.cfg")

ConfigParserClass = configparser.RawConfigParser

class ConfigError(Exception):
	pass

def with_default(func, msg = None):
	def method(cls, section, option, default = None):
		try:
			return func(cls.parser, section, option)
		except configparser.NoSectionError:
			return default
		except configparser.NoOptionError:
			return default
		except ValueError as err:
			raise ConfigError("%s::%s: %s" % (section, option, msg or err))
	return method

class CfgParser:
	def __init__(self):
		self.parser = ConfigParserClass()

	get = with_default(ConfigParserClass.get)
	getbool = with_default(ConfigParserClass.getboolean, "invalid bool")

	def __getattr__(self, attr):
		return getattr(self.parser, attr)

class Settings:
	def __init__(self, cfg):
		self.coding = cfg.get("input", "coding") or None
		self.autodetect = cfg.getbool("input", "autodetect", True)
		self.check_file_placement = cfg.getbool("parser", "check_file_placement", False)

def load(path = None):
	"""Read settings, from ~/.cuesheet.cfg unless told otherwise.

	Called by the readers on each use, so a broken file only fails them.
	"""
	if path is None:
		path = CONFIG_FILE_PATH

	cfg = CfgParser()
	try:
		cfg.read(path)
	except configparser.Error as err:
		raise ConfigError("%s: %s" % (path, err))

	return Settings(cfg)
