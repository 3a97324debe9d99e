from .pool import ProcessPool
from .process import WorkerProcess
from .thread import ThreadPool

__all__ = ['ProcessPool', 'WorkerProcess', 'ThreadPool']
