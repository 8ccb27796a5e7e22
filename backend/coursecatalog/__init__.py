# Course Catalog backend package
