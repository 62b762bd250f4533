from abc import ABC, abstractmethod

class BaseJobProvider(ABC):
    """
    Interface every job repository follows.

    Providers return raw job records (dicts); validation happens in
    ``job_schema.load_jobs`` so the calendar never sees malformed data.
    """

    name = None

    @abstractmethod
    def get_jobs(self):
        """
        Return every scheduled job.
        Returns: [ {job dict}, {job dict}, ... ]
        """
        pass

    @abstractmethod
    def update_job(self, job_id, changes):
        """
        Apply ``changes`` to one job.
        Returns: the updated job dict, or None when no such job exists.
        """
        pass
