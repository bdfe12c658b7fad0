"""Audio effect patches that process blocks of samples."""