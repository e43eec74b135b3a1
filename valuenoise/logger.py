"""
Logging configuration for noise generation.

Library modules register named sub-loggers with addLog() at import time. No
handlers are attached until an application calls setupMain(), so importing the
package never prints anything. Once the main logger exists, every registered
sub-logger shares its console and file handlers.


Functions
---------
**Setup:**

    setupMain(fileName, fileFormat, fileLevel, outFormat, outLevel)
        Configure and return the main logger.

**Logger Management:**

    addLog(name)
        Create logger that uses main logger handlers.
    removeLog(name)
        Remove logger and close unshared handlers.
    deepRemoveLog(name)
        Remove logger and close all its handlers.

**Handler Management:**

    addMainHandlers(subLog)
        Attach main logger handlers to a sub-logger.
    removeHandlers(name)
        Remove all handlers from logger, closing unshared ones.
    closeHandler(handler)
        Close handler and reset module globals that point to it.
    deepRemoveHandler(handler)
        Remove handler from every logger and close it.

**Formatting:**

    CustomFormatter
        Bracketed function names and multi-line message prefixes.


Global Variables
----------------
log : logging.Logger
    Main logger instance, None until setupMain() runs.
consoleHandler : logging.StreamHandler
    Shared console handler.
fileHandler : logging.FileHandler
    Shared file handler.
"""

from typing import Optional
from datetime import datetime
import logging
import os

#-----------------------------------------------------------------------------#

# Logging levels
DEBUG = logging.DEBUG           # 10
INFO = logging.INFO             # 20
WARNING = logging.WARNING       # 30
ERROR = logging.ERROR           # 40
CRITICAL = logging.CRITICAL     # 50

# Log record component formats
DATETIME = '%(asctime)s'
NAME  = '%(name)-10s'
LEVEL = '%(levelname)-7s'
FUNCTION = '%(funcName)s'
MESSAGE = '%(message)s'

# Delimiters
CS = ' : '      # Colon with spaces
RAB = '>'       # Right angle bracket
P = '|'         # Pipe
S = ' '         # Space

# Formatting strings
FMT_DATE = '%H:%M:%S'
FMT_OUT = NAME+CS+LEVEL+S+RAB+S+MESSAGE
FMT_FILE = P+DATETIME+P+S+NAME+S+LEVEL+S+FUNCTION+CS+MESSAGE

# Main logger name
MAIN_LOG = 'valuenoise'

# Global variables -----------------------------------------------------------#

log = None
consoleHandler = None
fileHandler = None

# Loggers created before the main logger, waiting for its handlers
pending = []

###############################################################################

class CustomFormatter(logging.Formatter):
    """
    Log formatter with bracketed function names and multi-line support.

    Function names are wrapped as ``[funcName]`` and padded to a fixed width.
    Messages containing newlines repeat the record prefix on every line so
    multi-line output (field summaries, lattice shapes) stays aligned.


    Parameters
    ----------
    fmt : str, optional
        Log record format string.
    datefmt : str, optional
        Date/time format string.
    """

    def format(self, record):
        """Apply bracketed function name and per-line prefix to a record."""

        if not (record.funcName.startswith("[")):
            func = f"[{record.funcName}]"
            record.funcName = f"{func:17}"

        newline = '\n'
        if (isinstance(record.msg, str) and newline in record.msg):
            # Work on a copy so other handlers see the original record
            record = logging.makeLogRecord(record.__dict__)
            prefixFmt, _, _ = self._fmt.partition(MESSAGE)
            if (DATETIME in prefixFmt):
                record.asctime = self.formatTime(record, self.datefmt)
            prefix = prefixFmt % record.__dict__
            record.msg = (newline + prefix).join(record.msg.split(newline))

        return super().format(record)

###############################################################################

def addMainHandlers(subLog:logging.Logger)->None:
    """
    Attach the main console and file handlers to a sub-logger.


    Parameters
    ----------
    subLog : logging.Logger
        Logger to receive main handlers.
    """

    if (consoleHandler is not None):
        subLog.addHandler(consoleHandler)
    if (fileHandler is not None):
        subLog.addHandler(fileHandler)
    subLog.debug('%s logger activated', subLog.name)

###############################################################################

def setupMain(fileName:Optional[str] = None,
              fileFormat:Optional[str] = FMT_FILE,
              fileLevel:int = DEBUG,
              outFormat:Optional[str] = FMT_OUT,
              outLevel:int = INFO,
              )->logging.Logger:
    """
    Configure and return the main logger.


    Parameters
    ----------
    fileName : str, optional
        Log file name. If None, file output is disabled.
    fileFormat : str, optional
        Format string for the file handler. If None, file output is disabled.
    fileLevel : int, default=DEBUG
        Minimum level written to the file.
    outFormat : str, optional
        Format string for the console handler. If None, console output is
        disabled.
    outLevel : int, default=INFO
        Minimum level printed to the console.


    Returns
    -------
    log : logging.Logger
        Main logger instance.


    Notes
    -----
    - Calling again after the main logger exists returns it unchanged.
    - Sub-loggers registered earlier with addLog() receive the handlers here.
    """

    global log, consoleHandler, fileHandler

    if (log is None):

        log = logging.getLogger(MAIN_LOG)
        log.setLevel(DEBUG)

        if (outFormat is not None):
            if (consoleHandler is None):
                consoleHandler = logging.StreamHandler()
                consoleHandler.set_name('Console handler')
                consoleHandler.setLevel(outLevel)
                consoleHandler.setFormatter(CustomFormatter(outFormat))
            log.addHandler(consoleHandler)
            log.debug('Console logging started')

        if ((fileName is not None) and (fileFormat is not None)):
            if (fileHandler is None):
                fileHandler = logging.FileHandler(fileName)
                fileHandler.set_name('File handler')
                fileHandler.setLevel(fileLevel)
                fileHandler.setFormatter(CustomFormatter(fileFormat,
                                                         FMT_DATE))
            log.addHandler(fileHandler)
            start = datetime.now().strftime("%m/%d/%Y %H:%M:%S")
            log.info('File logging started at %s in %s',
                     start, os.path.basename(fileName))

        while pending:
            addMainHandlers(logging.getLogger(pending.pop()))

    return log

###############################################################################

def addLog(name:str)->logging.Logger:
    """
    Create a logger that shares the main logger handlers.


    Parameters
    ----------
    name : str
        Logger name.


    Returns
    -------
    logger : logging.Logger
        New or existing logger.


    Notes
    -----
    Until setupMain() runs a sub-logger has no handlers of its own. Records
    still propagate to the root logger, and when nothing in the hierarchy
    handles them WARNING and above reach stderr through the logging module's
    last resort handler.
    """

    if (name in logging.Logger.manager.loggerDict):
        return logging.getLogger(name)

    thisLog = logging.getLogger(name)
    thisLog.setLevel(DEBUG)

    if (log is None):
        pending.append(name)
    else:
        addMainHandlers(thisLog)

    return thisLog

###############################################################################

def closeHandler(handler:logging.Handler)->None:
    """Close handler and clear the module global that refers to it."""

    global consoleHandler, fileHandler

    handler.close()
    if (handler is consoleHandler):
        consoleHandler = None
    elif (handler is fileHandler):
        fileHandler = None

###############################################################################

def _isShared(handler:logging.Handler)->bool:
    for _,l in logging.Logger.manager.loggerDict.items():
        if (isinstance(l, logging.Logger) and (handler in l.handlers)):
            return True
    return False

###############################################################################

def removeHandlers(name:str)->None:
    """
    Remove all handlers from a logger, closing the ones no other logger uses.


    Parameters
    ----------
    name : str
        Logger name.
    """

    thisLog = logging.getLogger(name)

    while thisLog.handlers:
        handler = thisLog.handlers[0]
        thisLog.removeHandler(handler)
        if (not _isShared(handler)):
            closeHandler(handler)

###############################################################################

def deepRemoveHandler(handler:logging.Handler)->None:
    """
    Remove handler from every registered logger and close it.


    Parameters
    ----------
    handler : logging.Handler
        Handler to remove and close.
    """

    for _,thisLog in logging.Logger.manager.loggerDict.items():
        if (isinstance(thisLog, logging.Logger)
            and (handler in thisLog.handlers)):
            thisLog.removeHandler(handler)
    closeHandler(handler)

###############################################################################

def removeLog(name:str)->None:
    """
    Remove logger and close the handlers only it was using.


    Parameters
    ----------
    name : str
        Logger name to remove.
    """

    global log

    thisLog = logging.getLogger(name)
    removeHandlers(name)
    del logging.Logger.manager.loggerDict[name]
    if (thisLog is log):
        log = None

###############################################################################

def deepRemoveLog(name:str)->None:
    """
    Remove logger and close all of its handlers, shared or not.


    Parameters
    ----------
    name : str
        Logger name to remove.
    """

    global log

    thisLog = logging.getLogger(name)
    while thisLog.handlers:
        deepRemoveHandler(thisLog.handlers[0])
    del logging.Logger.manager.loggerDict[name]
    if (thisLog is log):
        log = None

###############################################################################
