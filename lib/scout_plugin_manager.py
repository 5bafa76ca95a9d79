import importlib
import logging

logger = logging.getLogger(__name__)


class ScoutPluginManager:
    def __init__(self, config):
        """
        Load the always-on expect plugin plus any plugins named in the configuration.
        """
        self.plugins = []
        plugins_to_load = ['expect'] + (config.plugins or [])
        plugins_to_load = list(dict.fromkeys(plugins_to_load))  # Remove duplicates while maintaining order
        for plugin_name in plugins_to_load:
            object_name = f"ScoutPlugin{self.camelize(plugin_name)}"
            self._load_plugin(plugin_name, object_name, config)
        self.plugins.sort(key=lambda plugin: plugin.priority)

    def run(self, method, *args, **kwargs):
        """
        Execute the specified method on all loaded plugins, collecting the results.
        """
        results = []
        for plugin in self.plugins:
            if hasattr(plugin, method):
                results.append(getattr(plugin, method)(*args, **kwargs))
        return results

    def verb(self, table, name):
        """
        Find a declaration verb by name in the 'member_verbs' or 'function_verbs'
        tables of the loaded plugins. First plugin by priority wins.
        """
        for verbs in self.run(table):
            if name in verbs:
                return verbs[name]
        return None

    def fallback_expectation(self, member, kind):
        for expectation in self.run('unexpected_access', member, kind):
            if expectation is not None:
                return expectation
        return None

    @property
    def names(self):
        return [type(plugin).__name__ for plugin in self.plugins]

    @staticmethod
    def camelize(lower_case_and_underscored_word):
        """
        Convert snake_case to CamelCase.
        """
        return "".join(
            word.capitalize() for word in lower_case_and_underscored_word.split("_")
        )

    def _load_plugin(self, plugin_name, object_name, config):
        """
        Dynamically load a plugin.
        """
        module_name = f"scout_plugin_{plugin_name.lower()}"
        try:
            plugin_module = importlib.import_module(module_name)
            plugin_class = getattr(plugin_module, object_name)
            self.plugins.append(plugin_class(config))
        except ImportError as e:
            logger.error("Failed to import module %s: %s", module_name, e)
            raise
        except AttributeError as e:
            logger.error("Class %s not found in module %s: %s", object_name, module_name, e)
            raise
        except Exception as e:
            logger.error("Unexpected error while loading plugin '%s': %s", plugin_name, e)
            raise RuntimeError(
                f"Scout unable to load plugin '{plugin_name}' '{object_name}'"
            ) from e
