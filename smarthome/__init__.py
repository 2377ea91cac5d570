"""Smart home devices, house reports, a framed TCP protocol, a networked smart socket, message senders and FizzBuzz."""

__version__ = "0.1.0"

__all__ = ["__version__"]