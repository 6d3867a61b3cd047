"""Terminal interaction layer of NEO Tracker."""
