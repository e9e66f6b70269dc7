import configparser
import os
from fun.activations import activations
from fun.ops.kernel  import kernels

class Config:

    @staticmethod
    def _parse_activation_options(raw_options):
        """
        Parse activation_options from string to list.

        Parameters:
            raw_options: Either "all", a comma-separated list, or already a list

        Returns:
            List of activation function names
        """
        if isinstance(raw_options, list):
            raw_options = ','.join(raw_options)

        if raw_options == 'all':
            return list(activations.keys())

        parsed = [opt.strip() for opt in raw_options.split(',') if opt.strip()]
        for opt in parsed:
            if opt not in activations:
                raise ValueError(f"Invalid activation function '{opt}' in activation_options")
        return parsed

    @staticmethod
    def _parse_float_list(raw_values):
        """Parse a comma-separated list of numbers (or pass a sequence through)."""
        if isinstance(raw_values, str):
            return [float(val) for val in raw_values.split(',') if val.strip()]
        return [float(val) for val in raw_values]

    def __init__(self, config_file: str | None = None):
        """
        Initialize Config by parsing an INI file, or create a default Config.

        Parameters:
            config_file: Path to the INI configuration file.
                         If None, creates a Config holding the default values.
        """

        # Default config, matching the values the library uses when called directly
        if config_file is None:
            self.kernel_backend    = 'numpy'
            self.sqrt_iterations   = 15
            self.ln_epsilon        = 1e-5
            self.ln_max_iterations = 1000

            self.activation_options = 'all'
            self.prelu_slope        = 0.2
            self.elu_scale          = 0.2

            self.scalar_input   = 4.0
            self.elu_input      = 1.2
            self.softmax_inputs = [0, 1, 2, 3, 4, 5, 6, 7, 8, 9]

            return

        if not os.path.exists(config_file):
            raise FileNotFoundError(f"Configuration file '{config_file}' not found")

        parser = configparser.ConfigParser(inline_comment_prefixes=(';', '#'))
        parser.read(config_file)

        # Sentinel for missing default values
        _NO_DEFAULT = object()

        # Helper function to safely parse values
        def get_value(section, key, value_type, default=_NO_DEFAULT):
            try:
                raw_value = parser.get(section, key)
                if raw_value.lower() == 'none':
                    return None
                if value_type == int:
                    return parser.getint(section, key)
                elif value_type == float:
                    return parser.getfloat(section, key)
                elif value_type == bool:
                    return parser.getboolean(section, key)
                elif value_type == str:
                    return raw_value
            except (configparser.NoSectionError, configparser.NoOptionError):
                if default is not _NO_DEFAULT:
                    return default
                raise

        # [KERNEL]

        # Which implementation of exp/sin/cos/sqrt/ln the activations use.
        # Allowed values:
        #   "numpy"  - the platform math library (autograd.numpy)
        #   "series" - truncated Taylor series and fixed-count iterations
        self.kernel_backend = get_value('KERNEL', 'backend', str)

        # Number of Newton steps taken by the series square root.
        self.sqrt_iterations = get_value('KERNEL', 'sqrt_iterations', int, default=15)

        # Convergence tolerance and iteration cap of the series logarithm.
        self.ln_epsilon        = get_value('KERNEL', 'ln_epsilon',        float, default=1e-5)
        self.ln_max_iterations = get_value('KERNEL', 'ln_max_iterations', int,   default=1000)

        # [ACTIVATIONS]

        # The activation functions to report on.
        # Either "all" or a comma-separated list of names.
        self.activation_options = get_value('ACTIVATIONS', 'activation_options', str, default='all')

        # The negative slope passed to parametric ReLU.
        self.prelu_slope = get_value('ACTIVATIONS', 'prelu_slope', float, default=0.2)

        # The scale passed to ELU.
        self.elu_scale = get_value('ACTIVATIONS', 'elu_scale', float, default=0.2)

        # [DEMO] (optional section)

        # The scalar every activation is evaluated at (ELU uses 'elu_input').
        self.scalar_input = get_value('DEMO', 'scalar_input', float, default=4.0)
        self.elu_input    = get_value('DEMO', 'elu_input',    float, default=1.2)

        # The sequence passed to softmax.
        self.softmax_inputs = get_value('DEMO', 'softmax_inputs', str, default='0,1,2,3,4,5,6,7,8,9')

    def __setattr__(self, name, value):
        """
        Override 'setattr' to validate and normalize fields when set.
        This allows users to write config.activation_options = "relu, gelu" and have it
        automatically converted to a list of activation names.
        """
        if name == 'activation_options':
            value = self._parse_activation_options(value)
        elif name == 'softmax_inputs':
            value = self._parse_float_list(value)
        elif name == 'kernel_backend' and value not in kernels:
            raise ValueError(f"Invalid kernel backend '{value}', expected one of {list(kernels)}")
        super().__setattr__(name, value)
