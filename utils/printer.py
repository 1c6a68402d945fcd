"""
Terminal UI printer for the Dark Web Leak Monitor
"""

from typing import Optional
from colorama import Fore, Style, init

# Initialize colorama for Windows compatibility
init(autoreset=True)


class Printer:
    """Colored terminal output"""

    # Colors
    CYAN = Fore.CYAN
    GREEN = Fore.GREEN
    YELLOW = Fore.YELLOW
    RED = Fore.RED
    MAGENTA = Fore.MAGENTA
    BLUE = Fore.BLUE
    WHITE = Fore.WHITE
    RESET = Style.RESET_ALL
    BOLD = Style.BRIGHT
    DIM = Style.DIM

    @staticmethod
    def banner():
        """Print the monitor banner"""
        banner = f"""
{Printer.CYAN}{Printer.BOLD}
╔═══════════════════════════════════════════════════════════╗
║                                                           ║
║          {Printer.GREEN}darkweb-monitor{Printer.CYAN} - Credential Leak Watch          ║
║                                                           ║
╚═══════════════════════════════════════════════════════════╝
{Printer.RESET}
"""
        print(banner)

    @staticmethod
    def phase(phase_name: str, detail: Optional[str] = None):
        """Print phase header"""
        if detail:
            print(f"\n{Printer.CYAN}{Printer.BOLD}═══ {phase_name} [{detail}] ═══{Printer.RESET}")
        else:
            print(f"\n{Printer.CYAN}{Printer.BOLD}═══ {phase_name} ═══{Printer.RESET}")

    @staticmethod
    def info(message: str):
        """Print info message"""
        print(f"{Printer.GREEN}[+] {message}{Printer.RESET}")

    @staticmethod
    def success(message: str):
        """Print success message"""
        print(f"{Printer.GREEN}{Printer.BOLD}[✓] {message}{Printer.RESET}")

    @staticmethod
    def warning(message: str):
        """Print warning message"""
        print(f"{Printer.YELLOW}[!] {message}{Printer.RESET}")

    @staticmethod
    def error(message: str):
        """Print error message"""
        print(f"{Printer.RED}[✗] {message}{Printer.RESET}")

    @staticmethod
    def alert_header(title: str):
        """Print the headline of an alert block"""
        print(f"\n{Printer.MAGENTA}{Printer.BOLD}🚨 {title}{Printer.RESET}")

    @staticmethod
    def field(label: str, value: str, color: str = WHITE):
        """Print a single ``label: value`` line"""
        print(f"{color}{label}: {value}{Printer.RESET}")

    @staticmethod
    def line(message: str = "", color: str = WHITE):
        """Print a plain line"""
        print(f"{color}{message}{Printer.RESET}")

    @staticmethod
    def separator(width: int = 50, char: str = "="):
        """Print separator"""
        print(f"{Printer.DIM}{char * width}{Printer.RESET}")

    @staticmethod
    def count(label: str, count: int, color: str = GREEN):
        """Print count"""
        print(f"{color}{Printer.BOLD}  {label}: {count}{Printer.RESET}")


# Global printer instance
_printer = None


def get_printer() -> Printer:
    """Get printer instance"""
    global _printer
    if _printer is None:
        _printer = Printer()
    return _printer
